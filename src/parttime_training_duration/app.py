import streamlit as st
import altair as alt
import streamlit_analytics2

from parttime_training_duration.calculations import (
    build_reduction_breakdown,
    calculate,
    form_values_from_selection,
    split_years_months,
)
from parttime_training_duration.config import (
    DEFAULT_DURATION_MONTHS,
    DEFAULT_FULLTIME_HOURS,
    DEFAULT_PARTTIME_HOURS,
    DEFAULT_POLICY,
    QUALIFICATION_REDUCTIONS,
    SCHOOL_DEGREE_REDUCTIONS,
)
from parttime_training_duration.logging_setup import get_logger, setup_logging
from parttime_training_duration.models import ErrorCode, Rounding
from parttime_training_duration.sanitize import sanitize_positive_decimal, to_number
from parttime_training_duration.tables import build_duration_table
from parttime_training_duration.validators import parttime_hours_bounds

logger = get_logger(__name__)


# Presentation texts live here; the engine only knows codes.
DEGREE_LABELS = {
    "hs": "Hauptschulabschluss",
    "mr": "Mittlere Reife / Realschulabschluss",
    "fhr": "Fachhochschulreife",
    "abi": "Abitur",
}

QUALIFICATION_LABELS = {
    "familyCare": "Familien- oder Pflegeverantwortung",
    "ageOver21": "Alter über 21 Jahre",
    "schoolIntermediate": "Mittlerer Schulabschluss (zusätzlich)",
    "schoolAdvanced": "Hochschulreife (zusätzlich)",
    "completedTraining": "Abgeschlossene Berufsausbildung",
    "vocationalFoundation": "Berufsgrundbildungsjahr / Berufsfachschule",
    "vocationalExperience": "Einschlägige Berufserfahrung",
    "academic": "Studium (ECTS / Studienleistungen)",
    "foreignRecognition": "Anerkannter ausländischer Abschluss",
}

ERROR_MESSAGES = {
    ErrorCode.INVALID_HOURS: (
        f"Vollzeitstunden müssen zwischen {DEFAULT_POLICY.fulltime_min_hours:g} und "
        f"{DEFAULT_POLICY.fulltime_max_hours:g} liegen, die Regelausbildungsdauer zwischen "
        f"{DEFAULT_POLICY.duration_min_months} und {DEFAULT_POLICY.duration_max_months} Monaten."
    ),
    ErrorCode.MIN_FACTOR: (
        "Die Teilzeit muss mindestens 50 % der Vollzeit betragen und unter der Vollzeit liegen."
    ),
}


def hours_input(label: str, default: float, key: str) -> float:
    """Text input that accepts German decimal commas."""
    raw = st.sidebar.text_input(label, value=f"{default:g}", key=key)
    sanitized = sanitize_positive_decimal(raw)
    if not sanitized.ok:
        st.sidebar.caption("Bitte eine Zahl eingeben (z. B. 37,5).")
    return to_number(sanitized.text)


def format_years_months(months: int) -> str:
    years, rest = split_years_months(months)
    return f"{years} Jahre, {rest} Monate"


# -----------------------------
# Streamlit UI
# -----------------------------
def main():
    setup_logging()
    st.set_page_config(
        page_title="Teilzeitausbildung",
        layout="wide"
    )
    with streamlit_analytics2.track():
        st.title("Teilzeitausbildung: Dauer berechnen")
        st.caption("Nach §7a BBiG / §27b HwO. Unverbindliche Orientierung, keine Rechtsberatung.")

        # ----- Sidebar inputs -----
        st.sidebar.header("Arbeitszeit")

        weekly_full = hours_input("Vollzeit (Stunden/Woche)", DEFAULT_FULLTIME_HOURS, "weekly_full")
        lower, upper = parttime_hours_bounds(weekly_full)
        st.sidebar.caption(f"Teilzeit: mindestens {lower:g}, weniger als {upper:g} Stunden.")
        weekly_part = hours_input("Teilzeit (Stunden/Woche)", DEFAULT_PARTTIME_HOURS, "weekly_part")

        full_duration_months = st.sidebar.number_input(
            "Regelausbildungsdauer (Monate)",
            min_value=0,
            max_value=60,
            value=DEFAULT_DURATION_MONTHS,
            step=6,
        )

        st.sidebar.header("Verkürzung")

        degree_options = [None] + list(SCHOOL_DEGREE_REDUCTIONS.keys())
        degree_id = st.sidebar.selectbox(
            "Schulabschluss",
            options=degree_options,
            format_func=lambda d: "Bitte wählen" if d is None else DEGREE_LABELS.get(d, d),
        )

        selection = st.sidebar.multiselect(
            "Weitere Gründe",
            options=list(QUALIFICATION_REDUCTIONS.keys()),
            format_func=lambda q: QUALIFICATION_LABELS.get(q, q),
        )

        manual_months = st.sidebar.number_input(
            "Manuelle Verkürzung (Monate)",
            min_value=0,
            max_value=DEFAULT_POLICY.max_total_reduction,
            value=0,
            step=1,
        )

        rounding = st.sidebar.radio(
            "Rundung",
            options=[r.value for r in Rounding],
            horizontal=True,
        )

        form = form_values_from_selection(
            weekly_full=weekly_full,
            weekly_part=weekly_part,
            full_duration_months=full_duration_months,
            degree_id=degree_id,
            manual_months=manual_months,
            selection=selection,
            rounding=rounding,
        )
        breakdown = build_reduction_breakdown(degree_id, manual_months, selection)
        result = calculate(form)

        tab_result, tab_table, tab_rules = st.tabs(
            ["Ergebnis", "Vergleich", "Rechenweg"]
        )

        # ===== RESULT TAB =====
        with tab_result:
            if not result.allowed:
                st.error(ERROR_MESSAGES[result.error_code])
            else:
                col1, col2, col3 = st.columns(3)
                col1.metric(
                    "Teilzeitdauer",
                    f"{result.parttime_final_months} Monate",
                    delta=f"{result.delta_months:+d} Monate",
                    delta_color="off",
                )
                col2.metric("Regelausbildungsdauer", f"{result.fulltime_months} Monate")
                col3.metric("Verkürzung gesamt", f"{result.total_reduction_months:g} Monate")

                st.write(format_years_months(result.parttime_final_months))

            if result.qualification_cap_exceeded:
                st.warning(
                    f"Weitere Gründe werden mit höchstens "
                    f"{DEFAULT_POLICY.qualification_category_cap} Monaten berücksichtigt."
                )
            if result.legal_hint:
                st.info(
                    "Eine Verkürzung über 6 Monate muss bei der zuständigen Stelle "
                    "beantragt werden (§8 BBiG)."
                )

        # ===== COMPARISON TAB =====
        with tab_table:
            df = build_duration_table(form)
            if df.empty:
                st.info("Für diese Vollzeitstunden gibt es keine gültige Teilzeit.")
            else:
                chart = (
                    alt.Chart(df)
                    .encode(
                        x=alt.X("Part-time hours:Q", title="Teilzeit (Stunden/Woche)"),
                        y=alt.Y("Part-time duration (months):Q", title="Dauer (Monate)"),
                        tooltip=[
                            alt.Tooltip("Part-time hours:Q", title="Stunden"),
                            alt.Tooltip("Part-time duration (months):Q", title="Monate"),
                            alt.Tooltip("Delta (months):Q", title="Differenz"),
                        ],
                    )
                )
                st.altair_chart(chart.mark_line() + chart.mark_circle(size=40), use_container_width=True)
                st.dataframe(df, use_container_width=True, hide_index=True)

        # ===== RULES TAB =====
        with tab_rules:
            st.markdown(
                f"""
        - **Schulabschluss:** `{breakdown.degree:g}` Monate
        - **Weitere Gründe:** `{breakdown.qualification_raw:g}` Monate, angerechnet `{breakdown.qualification:g}`
        - **Manuell:** `{breakdown.manual:g}` Monate
        - **Verkürzung gesamt:** `{breakdown.total:g}` von höchstens `{DEFAULT_POLICY.max_total_reduction}` Monaten
        - **Faktor Teilzeit/Vollzeit:** `{result.factor:.2%}`
        - **Mindestdauer:** `{DEFAULT_POLICY.min_duration_months}` Monate
        """
            )

        logger.debug("Rendered result %s", result.to_dict())


if __name__ == "__main__":
    main()
