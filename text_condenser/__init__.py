from .datatypes import Sentence, Document, TermFrequencyMap, SummaryContext, SummaryOutcome
from .config import SummarizerConfig, InvalidConfigurationError
from .preprocessing import PreprocessConfig, preprocess_text, split_sentences, tokenize, build_stopwords, STOPWORDS
from .features import build_term_frequencies
from .scoring import position_bonus, score_sentence, score_sentences, rank_sentences
from .sources import TextSource, SummarySink, ListSource, MemorySink, collect_recent_text
from .summarize import summarize, generate_summary, run_summarization
