"""
Streamlit Demo Application for the Schedule Converter

Interactive web UI: upload a schedule PDF, preview the CSV, download or copy it.
Run with: streamlit run demo_streamlit.py
"""
import streamlit as st

from schedule_converter.config import load_band_config
from schedule_converter.exceptions import ScheduleProcessingError
from schedule_converter.services import ConversionServiceFactory
from schedule_converter.utils import generate_output_filename


def main():
    st.set_page_config(
        page_title="Construction Schedule Converter",
        page_icon="📅",
        layout="wide"
    )

    st.title("📅 Construction Schedule Converter")
    st.markdown("Convert schedule PDFs to Excel-compatible CSV format")

    # Sidebar for configuration
    with st.sidebar:
        st.header("⚙️ Configuration")

        grouping = st.radio(
            "Line grouping",
            ["round", "delta"],
            help="round: fragments on the same rounded baseline; delta: within a vertical tolerance"
        )
        tolerance = st.number_input("Delta tolerance", min_value=0.0, value=5.0, step=0.5)
        include_section = st.checkbox("Add Section column", value=False)

    uploaded_file = st.file_uploader(
        "Upload Schedule PDF",
        type=["pdf"],
        help="Schedule report exported from your project-management software"
    )

    if uploaded_file is None:
        st.info("👆 Upload a PDF file to get started")
        return

    st.success(f"✅ Uploaded: {uploaded_file.name}")

    if st.button("🚀 Convert", type="primary"):
        with st.spinner("Processing your schedule..."):
            try:
                service = ConversionServiceFactory.create_schedule_service(
                    bands=load_band_config(),
                    grouping=grouping,
                    tolerance=tolerance,
                    include_section=include_section,
                )
                result = service.convert(uploaded_file.getvalue())
                st.session_state['conversion_result'] = result
                st.session_state['conversion_text'] = service.render(result)
                st.session_state['pdf_name'] = uploaded_file.name
            except (ScheduleProcessingError, ValueError) as e:
                st.session_state.pop('conversion_result', None)
                st.error(f"❌ {e}")

    if 'conversion_result' not in st.session_state:
        return

    result = st.session_state['conversion_result']
    text = st.session_state['conversion_text']
    pdf_name = st.session_state['pdf_name']
    summary = result.summary

    st.header("📊 Results")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Activities", summary.total_activities)
    with col2:
        st.metric("Sections", len(summary.sections))
    with col3:
        st.metric("Rejected Rows", summary.rejected_rows)
    with col4:
        st.metric("Pages Processed", summary.pages_processed)

    tab1, tab2 = st.tabs(["📋 Preview", "🔍 Activities"])

    with tab1:
        # st.code renders a copy-to-clipboard button
        st.code(text, language='text')
        st.download_button(
            label="💾 Download CSV",
            data=text,
            file_name=generate_output_filename(pdf_name, '.csv'),
            mime="text/csv"
        )

    with tab2:
        if result.activities:
            st.dataframe([activity.model_dump() for activity in result.activities])
        else:
            st.info("No activities found in this PDF.")


if __name__ == "__main__":
    main()
