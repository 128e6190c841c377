from __future__ import annotations
import streamlit as st
import re
import logging
import pandas as pd
import numpy as np
from typing import List
import matplotlib.pyplot as plt
import io
from dataclasses import replace

from text_condenser.config import SummarizerConfig
from text_condenser.datatypes import SummaryContext, STATUS_READY, STATUS_EMPTY, STATUS_SKIPPED
from text_condenser.summarize import run_summarization
from text_condenser.preprocessing import preprocess_text, PreprocessConfig, build_stopwords, STOPWORD_CORPORA
from text_condenser.features import build_term_frequencies, top_terms
from text_condenser.scoring import score_sentences, rank_sentences, position_bonus
from text_condenser.sources import ListSource, collect_recent_text

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 120

def extract_rtf_text(rtf_content):
    """Extract plain text from RTF content."""
    # Paragraph marks become blank lines so messages stay separate
    text = re.sub(r'\\par[d]?\b', '\n\n', rtf_content)
    text = re.sub(r'\\[a-z]+-?\d* ?', '', text)
    text = re.sub(r'\\\*.*?;', '', text)
    text = re.sub(r'\\[^a-z]', '', text)
    text = re.sub(r'[{}]', '', text)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def extract_markdown_text(md_content):
    """Extract plain text from Markdown content."""
    text = re.sub(r'^#{1,6}\s+', '', md_content, flags=re.MULTILINE)
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    # Code blocks carry no prose worth ranking
    text = re.sub(r'```.*?```', '', text, flags=re.DOTALL)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    text = re.sub(r'^-{3,}$', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def load_text_from_file(uploaded_file):
    """Load text content from uploaded file based on file type."""
    file_extension = uploaded_file.name.lower().split('.')[-1]
    content = uploaded_file.read().decode("utf-8")

    if file_extension == 'rtf':
        return extract_rtf_text(content)
    elif file_extension == 'md':
        return extract_markdown_text(content)
    else:
        return content

def preview(summary: str, limit: int = PREVIEW_CHARS) -> str:
    return summary if len(summary) <= limit else summary[:limit] + "…"

class StreamlitSink:
    """Shows the summary and offers it as a download."""

    def deliver(self, summary: str) -> None:
        st.markdown("---")
        st.header("Final Summary")
        st.text_area("Summary", summary, height=150, disabled=True)
        st.download_button("Download summary", summary, file_name="summary.txt", mime="text/plain")

def draw_score_chart(scores: List[float], selected: List[int]):
    """Bar chart of sentence scores, selected sentences highlighted."""
    fig, ax = plt.subplots(figsize=(12, 4))
    colors = ['orange' if i in selected else 'lightblue' for i in range(len(scores))]
    ax.bar([f"S{i+1}" for i in range(len(scores))], scores, color=colors)
    ax.set_ylabel("Score")
    ax.set_title("Sentence Scores (selected in orange)", fontsize=14, fontweight='bold')
    if len(scores) > 30:
        ax.set_xticks([])
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close(fig)
    return buf

def create_sidebar_controls() -> tuple:
    """Create sidebar controls for parameters."""
    st.sidebar.header("Parameters")
    sentences = st.sidebar.slider("Summary sentences", min_value=1, max_value=30, value=6, step=1,
                                  help="Maximum number of sentences kept")
    window = st.sidebar.slider("Message window", min_value=10, max_value=1000, value=400, step=10,
                               help="Most recent messages included")
    decay = st.sidebar.slider("Position decay", min_value=1, max_value=50, value=8, step=1,
                              help="Sentences per step of the position bonus")
    languages = st.sidebar.multiselect("Stopword languages", sorted(STOPWORD_CORPORA), default=["de", "en"])

    st.sidebar.header("Auto Mode")
    auto_mode = st.sidebar.checkbox("Auto", value=False,
                                    help="Summarize automatically once the conversation is long enough")
    threshold = st.sidebar.slider("Message threshold", min_value=1, max_value=500, value=100, step=1,
                                  help="Messages needed before an automatic summary")

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=True, help="Show detailed pipeline steps")

    config = SummarizerConfig(summary_sentences=sentences, message_window=window,
                              position_decay=decay, languages=tuple(languages),
                              message_threshold=threshold)
    return config, auto_mode, debug_mode

def debug_pipeline(text: str, config: SummarizerConfig):
    """Run the pipeline stage by stage and render each step."""

    st.header("Step 1: Segmentation & Tokenization")
    with st.expander("Pre-processing Details", expanded=True):
        cfg = PreprocessConfig(stopwords=build_stopwords(config.languages),
                               min_token_length=config.min_token_length)
        doc = preprocess_text(text, max_sentences=config.summary_sentences, cfg=cfg)
        st.success(f"Segmented {len(doc.sentences)} sentences")

        col1, col2, col3 = st.columns(3)
        total_tokens = sum(len(s.tokens) for s in doc.sentences)
        with col1:
            st.metric("Total Sentences", len(doc.sentences))
        with col2:
            st.metric("Total Words (original)", len(text.split()))
        with col3:
            st.metric("Significant Tokens", total_tokens)

        sentences_df = pd.DataFrame([{
            "Sentence #": s.idx + 1,
            "Text": s.text[:80] + "..." if len(s.text) > 80 else s.text,
            "Tokens": len(s.tokens),
            "Processed Tokens": ", ".join(s.tokens[:8]) + ("..." if len(s.tokens) > 8 else ""),
        } for s in doc.sentences])
        st.dataframe(sentences_df, use_container_width=True)

    if not doc.sentences:
        return

    st.header("Step 2: Term Frequencies")
    with st.expander("Term Frequency Details", expanded=True):
        tf = build_term_frequencies(doc)
        st.metric("Unique Terms", len(tf))
        tf_df = pd.DataFrame([{"Term": t, "Count": c} for t, c in top_terms(tf, k=50)])
        st.dataframe(tf_df, use_container_width=True, height=250)

    st.header("Step 3: Sentence Scoring")
    with st.expander("Scoring Details", expanded=True):
        scores = score_sentences(doc, tf, position_decay=config.position_decay)
        ranked = rank_sentences(doc)
        rank_of = {s.idx: r + 1 for r, s in enumerate(ranked)}

        scoring_df = pd.DataFrame([{
            "Sentence #": s.idx + 1,
            "Tokens": len(s.tokens),
            "Position Bonus": f"{position_bonus(s.idx, config.position_decay):.3f}",
            "Score": f"{s.score:.3f}",
            "Rank": rank_of[s.idx],
        } for s in doc.sentences])
        st.dataframe(scoring_df, use_container_width=True)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Mean Score", f"{np.mean(scores):.3f}")
        with col2:
            st.metric("Std Score", f"{np.std(scores):.3f}")
        with col3:
            st.metric("Zero-score Sentences", int(np.sum(np.array(scores) == 0.0)))

    st.header("Step 4: Selection")
    with st.expander("Selection Details", expanded=True):
        k = config.summary_sentences
        if len(doc.sentences) <= k:
            selected = [s.idx for s in doc.sentences]
            st.info("Document has no more sentences than requested - keeping all of them")
        else:
            selected = sorted(s.idx for s in ranked[:k])

        selection_df = pd.DataFrame([{
            "Sentence #": s.idx + 1,
            "Score": f"{s.score:.3f}",
            "Selected": "yes" if s.idx in selected else "no",
            "Text": s.text,
        } for s in doc.sentences])
        st.dataframe(selection_df, use_container_width=True)

        if len(doc.sentences) <= 200:
            st.image(draw_score_chart(scores, selected), caption="Sentence scores", use_container_width=True)
        else:
            st.info(f"Too many sentences to chart ({len(doc.sentences)})")

def apply_auto_mode(context: SummaryContext, auto_mode: bool) -> SummaryContext:
    """Carry the sidebar "Auto" toggle into the summary context."""
    if context.auto_mode == auto_mode:
        return context
    return replace(context, auto_mode=auto_mode)

def show_outcome(outcome, text: str, manual: bool):
    if outcome.status == STATUS_EMPTY:
        st.warning("Nothing to summarize")
    elif outcome.status == STATUS_SKIPPED:
        if st.session_state.summary_context.auto_mode:
            st.caption(f"Auto summary waiting: {outcome.reason}")
    elif outcome.status == STATUS_READY:
        if not manual:
            st.info("Auto summary created")
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Original Length", len(text.split()))
        with col2:
            st.metric("Summary Length", len(outcome.summary.split()))
        with col3:
            compression = len(outcome.summary.split()) / len(text.split()) if text.split() else 0
            st.metric("Actual Compression", f"{compression:.2%}")

def main():
    logging.basicConfig(level=logging.INFO)
    st.title("Conversation Condenser")
    st.write("Paste or upload a conversation to get an extractive summary of its most representative sentences")

    config, auto_mode, debug_mode = create_sidebar_controls()
    if "summary_context" not in st.session_state:
        st.session_state.summary_context = SummaryContext()
    st.session_state.summary_context = apply_auto_mode(st.session_state.summary_context, auto_mode)

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'rtf', 'md'],
        help="Messages are separated by blank lines (supports .txt, .rtf, .md formats)"
    )
    pasted = st.text_area("...or paste the conversation", height=200)

    text = load_text_from_file(uploaded_file) if uploaded_file is not None else pasted
    source = ListSource.from_text(text)
    st.caption(f"Messages: {source.count_items()}")

    # A button press is a manual run; every other rerun is an automatic trigger
    manual = st.button("Summarize now", type="primary")
    try:
        if manual and debug_mode:
            config.validate()
            st.markdown("---")
            st.title("Pipeline Debug Mode")
            debug_pipeline(collect_recent_text(source, config.message_window), config)

        context, outcome = run_summarization(source, st.session_state.summary_context,
                                             config=config, manual=manual, sink=StreamlitSink())
        st.session_state.summary_context = context
        show_outcome(outcome, text, manual)
    except Exception as e:
        logger.error("Summarization failed: %s", e)
        st.error(f"Error generating summary: {str(e)}")
        st.exception(e)

    last = st.session_state.summary_context.last_summary
    st.sidebar.caption(f"Last summary: {preview(last) if last else '—'}")
    if last:
        st.sidebar.download_button("Download last summary", last, file_name="summary.txt",
                                   mime="text/plain", key="last_summary_download")

if __name__ == "__main__":
    main()
