import pandas as pd
import streamlit as st

from reclayout.config import LayoutConfig
from reclayout.errors import LayoutError
from reclayout.layout.export import layout_to_json, layout_to_records
from reclayout.layout.render import render_report
from reclayout.pipeline import compute_layout
from reclayout.samples import list_samples, load_sample


def _show_layout(text: str, strict: bool, download_name: str) -> None:
    try:
        layout = compute_layout(text, LayoutConfig(strict=strict))
    except LayoutError as exc:
        st.error(str(exc))
        return

    report = render_report(layout)
    st.success(f"Structure {layout.structure_name or '(unnamed)'}: {layout.grand_total} bytes")
    st.code(report, language="text")

    table = pd.DataFrame(layout_to_records(layout))
    if not table.empty:
        st.dataframe(
            table[["name", "level", "format", "usage", "position", "effective_length", "span"]],
            height=300,
        )
        leaves = table[~table["is_group"] & (table["effective_length"] > 0)]
        if not leaves.empty:
            st.markdown("**Bytes per leaf field**")
            st.bar_chart(leaves.set_index("name")["effective_length"])

    st.download_button("Download layout", report.encode(), file_name=f"{download_name}.RL")
    st.download_button("Download JSON", layout_to_json(layout), file_name=f"{download_name}.json")


def main() -> None:
    st.title("Record Layout Generator")
    st.caption(
        "Turn a copybook record description into field formats, lengths and byte positions."
    )
    st.session_state.setdefault("history", [])

    tabs = st.tabs(["Convert", "Samples"])

    with tabs[0]:
        st.subheader("Convert a copybook")
        uploaded = st.file_uploader(
            "Upload copybook", type=["cpy", "cbl", "ds", "fd", "txt"], key="convert_file"
        )
        pasted = st.text_area("...or paste the record description", height=200)
        strict = st.checkbox("Strict (fail on unrecognized lines)", value=False)
        text = uploaded.read().decode("utf-8", errors="replace") if uploaded else pasted
        if text.strip():
            name = uploaded.name.rsplit(".", 1)[0] if uploaded else "layout"
            _show_layout(text, strict=strict, download_name=name)
            st.session_state["history"].append(name)
        if st.session_state["history"]:
            st.markdown("Recent conversions:")
            for entry in st.session_state["history"][-5:]:
                st.code(entry)

    with tabs[1]:
        st.subheader("Sample copybooks")
        samples = list_samples()
        choice = st.selectbox(
            "Sample",
            [s.name for s in samples],
            format_func=lambda n: f"{n} - {next(s.description for s in samples if s.name == n)}",
        )
        if choice:
            source = load_sample(choice)
            with st.expander("Source", expanded=False):
                st.code(source, language="cobol")
            _show_layout(source, strict=False, download_name=choice)


if __name__ == "__main__":
    main()
