import pandas as pd
import streamlit as st

from transcripts.backend_logic import HIGH_HONORS_MIN, HONORS_MIN, WEIGHTS, process_students
from transcripts.errors import InputError
from transcripts.io_csv import load_students_csv, load_students_json, transcripts_to_frame
from transcripts.sample_data import SAMPLE_STUDENTS

# ------------------------
# Streamlit UI (with optional CSV / JSON upload)
# ------------------------

st.set_page_config(
    page_title="Student Transcript & GPA Calculator",
    page_icon="🎓",
    layout="wide",
)

st.title("🎓 Student Transcript & GPA Calculator")
st.write(
    "Builds per-subject grades, semester GPAs, cumulative GPA and an honors tier "
    "for each student. Final grades weight assignments "
    f"{WEIGHTS['assignments']:.0%}, exams {WEIGHTS['exams']:.0%} and attendance "
    f"{WEIGHTS['attendance']:.0%}, mapped onto a 4.0 grade-point scale."
)

# ------------------------
# Input form
# ------------------------

with st.form("transcript_input_form"):
    st.subheader("1. Load student records")

    up1, up2 = st.columns(2)
    with up1:
        records_csv = st.file_uploader(
            "Upload records CSV (student_id, name, term, subject, credits, assignments, exams, attendance)",
            type=["csv"],
            key="records_csv",
        )
    with up2:
        records_json = st.file_uploader(
            "Or upload a JSON array of students",
            type=["json"],
            key="records_json",
        )

    st.caption("With no upload the built-in example students are used.")
    submitted = st.form_submit_button("Build transcripts", type="primary")


if submitted:
    upload_error = None
    students = SAMPLE_STUDENTS
    try:
        if records_csv is not None:
            students = load_students_csv(records_csv)
        elif records_json is not None:
            students = load_students_json(records_json)
    except InputError as e:
        upload_error = str(e)

    if upload_error:
        st.error(f"Upload error: {upload_error}")
        st.session_state.pop("batch", None)
    else:
        st.session_state["batch"] = process_students(students)


# ------------------------
# Show transcripts if we have them
# ------------------------

if "batch" in st.session_state:
    batch = st.session_state["batch"]

    st.markdown("---")
    st.subheader("2. Transcripts")

    for label, message in batch.errors:
        st.error(f"Student {label} skipped: {message}")

    if not batch.transcripts:
        st.warning("No valid student records were found.")

    for transcript in batch.transcripts:
        st.markdown(f"### {transcript['name']} ({transcript['student_id']})")

        c1, c2, c3 = st.columns(3)
        with c1:
            st.metric("Cumulative GPA", transcript["cumulative_gpa"])
        with c2:
            st.metric("Academic honors", transcript["academic_honors"])
        with c3:
            st.metric("Semesters", len(transcript["semesters"]))

        for semester in transcript["semesters"]:
            st.markdown(f"**{semester['term']}** · Semester GPA {semester['semester_gpa']}")
            subjects_df = pd.DataFrame(semester["subjects"]).rename(columns={
                "name": "Subject",
                "credits": "Credits",
                "final_grade": "Final Grade",
                "grade_point": "Grade Point",
            })
            st.dataframe(
                subjects_df,
                hide_index=True,
                width="stretch",
            )

    if batch.transcripts:
        st.download_button(
            "Download transcripts CSV",
            transcripts_to_frame(batch.transcripts).to_csv(index=False),
            file_name="transcripts.csv",
            mime="text/csv",
        )
else:
    st.info("Upload student records or click **Build transcripts** to use the example data.")


st.header("FAQ")

st.subheader("How is the final grade calculated?")
st.write(
    "Each subject's final grade is a weighted sum of its assignments, exams and attendance "
    "scores (each between 0 and 100). The grade point is the final grade scaled onto 0–4."
)

st.subheader("How are GPAs and honors decided?")
st.write(
    "Semester GPA is the credit-weighted average of subject grade points; cumulative GPA is "
    f"the credit-weighted average of semester GPAs. A cumulative GPA of {HIGH_HONORS_MIN} or "
    f"more earns High Honors and {HONORS_MIN} or more earns Honors."
)

st.subheader("Why is a student missing from the results?")
st.write(
    "Any invalid score or malformed semester/subject rejects that student's whole transcript. "
    "The reason is shown above the transcripts so the record can be corrected."
)
