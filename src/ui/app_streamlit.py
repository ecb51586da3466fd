from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pandas as pd
import streamlit as st

from dhm_timestamp.errors import InvalidDurationError
from dhm_timestamp.formatting import decompose_duration, format_duration_as_timestamp


# ----------------------------
# Helpers UI
# ----------------------------

EXAMPLE_SECONDS = [0, 90, 3661, 90000, 172800]


def init_session_state() -> None:
    if "seconds" not in st.session_state:
        st.session_state.seconds = 3661.0

    if "durations_df" not in st.session_state:
        st.session_state.durations_df = pd.DataFrame([{"Segundos": s} for s in EXAMPLE_SECONDS])


def format_table(df: pd.DataFrame) -> Tuple[pd.DataFrame, List[str]]:
    rows: List[Dict[str, Any]] = []
    errors: List[str] = []

    for idx, row in enumerate(df.to_dict("records"), start=1):
        value = row.get("Segundos")
        if value is None or pd.isna(value):
            continue
        try:
            parts = decompose_duration(float(value))
        except InvalidDurationError as e:
            errors.append(f"Fila #{idx}: {e}")
            continue

        rows.append(
            {
                "Segundos": value,
                "Días": parts.days,
                "Horas": parts.hours,
                "Minutos": parts.minutes,
                "Formateado": format_duration_as_timestamp(float(value)),
            }
        )

    return pd.DataFrame(rows, columns=["Segundos", "Días", "Horas", "Minutos", "Formateado"]), errors


# ----------------------------
# App
# ----------------------------

def main() -> None:
    st.set_page_config(page_title="Duración → d h m", layout="wide")
    init_session_state()

    st.title("Formateo de duraciones (d h m)")
    st.caption("Los segundos sobrantes se truncan. El prefijo de días solo aparece a partir de 24h.")

    col_left, col_right = st.columns([1, 1.4], gap="large")

    with col_left:
        st.subheader("1) Valor único")
        st.number_input("Duración (segundos)", step=60.0, key="seconds")
        try:
            st.metric("Formateado", format_duration_as_timestamp(st.session_state.seconds))
        except InvalidDurationError as e:
            st.error(str(e))

    with col_right:
        st.subheader("2) Tabla")
        st.session_state.durations_df = st.data_editor(
            st.session_state.durations_df,
            num_rows="dynamic",
            use_container_width=True,
            column_config={
                "Segundos": st.column_config.NumberColumn("Segundos", required=True),
            },
        )

        result_df, errors = format_table(st.session_state.durations_df)
        for err in errors:
            st.error(err)
        st.dataframe(result_df, use_container_width=True, hide_index=True)


if __name__ == "__main__":
    main()
