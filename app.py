import streamlit as st

from kmapcore import (
    cells_from_minterms,
    get_dont_care_string,
    get_minterm_string,
    get_simplified_expression,
    truth_table_rows,
    format_cell_state,
)
from kmapcore.render import draw_kmap, term_color
from kmapcore.symbolic import reference_sop, verify_result

# ------------------------------- Page setup -------------------------------

st.set_page_config(page_title="K-Map Simplifier", layout="wide")
st.title("🧮 K-Map Simplifier")
st.markdown("---")

n = st.number_input("Number of variables:", min_value=2, max_value=4, value=3, step=1)
n = int(n)

raw_mins = st.text_input("Minterms (e.g. 1,3,5,7):")
raw_dcs = st.text_input("Don't cares (optional):")


def parse_indices(raw: str):
    return [int(x.strip()) for x in raw.split(",") if x.strip()]


# ------------------------------- Solve -------------------------------
if st.button("Simplify 🚀"):
    try:
        cells = cells_from_minterms(n, parse_indices(raw_mins), parse_indices(raw_dcs))
        result = get_simplified_expression(cells, n)

        st.success(f"**SOP:**  \nF = {result.expression}")
        st.caption(f"F = {get_minterm_string(cells)}{get_dont_care_string(cells)}")

        steps = (
            f"• variables: {n}\n"
            f"• terms: {len(result.terms)}\n"
            f"• SymPy SOPform: F = {reference_sop(cells, n)}\n"
            f"• cover checked against truth table: {verify_result(cells, n, result)}"
        )
        st.text_area("Details:", steps, height=130)

        left, right = st.columns([3, 2])
        with left:
            st.markdown("### 🗺️ K-Map")
            st.pyplot(draw_kmap(cells, n, result))
            for term in result.terms:
                st.markdown(
                    f"<span style='color:{term_color(term.color_index)}'>■</span> "
                    f"`{term.expression}` covers {list(term.minterms)}",
                    unsafe_allow_html=True,
                )
        with right:
            st.markdown("### Truth table")
            st.table(
                [
                    {"#": idx, "inputs": bits, "F": format_cell_state(state)}
                    for idx, bits, state in truth_table_rows(cells, n)
                ]
            )

    except Exception as e:
        st.error(f"Calculation failed:\n{e}")
