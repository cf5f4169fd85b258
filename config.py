# config.py
"""
Configuration settings for the Rerank summarizer
"""

# Output settings
DEFAULT_OUTPUT_DIR = "data/outputs/"

# Summarization settings
DEFAULT_SENTENCES_COUNT = 3  # Number of sentences in each summary
DEFAULT_METHODS = ["textrank", "lexrank", "frequency", "bart"]
DEFAULT_SEGMENTER = "regex"  # "regex" (naive split) or "punkt" (NLTK)

# Sentence segmentation settings
MIN_SENTENCE_LENGTH = 10  # Sentences must be strictly longer than this

# TextRank settings
TEXTRANK_DAMPING = 0.85
TEXTRANK_ITERATIONS = 50

# LexRank settings
LEXRANK_THRESHOLD = 0.1  # Similarities at or below this are dropped
LEXRANK_ITERATIONS = 50

# Frequency ranker settings
FREQUENCY_MIN_WORD_LENGTH = 4  # Words shorter than this are not counted

# Iterative rankers run a fixed number of rounds unless a tolerance is set
CONVERGENCE_TOLERANCE = None

# BART (Hugging Face Inference API) settings
BART_MODEL_NAME = "facebook/bart-large-cnn"
BART_API_URL = "https://api-inference.huggingface.co/models/" + BART_MODEL_NAME
BART_TIMEOUT = 30  # Seconds before the request is abandoned
BART_MAX_INPUT_CHARS = 1024
BART_MIN_TOKENS_PER_SENTENCE = 10
BART_MAX_TOKENS_PER_SENTENCE = 40
API_TOKEN_ENV_VAR = "HF_API_TOKEN"

# Quality metric weights
COVERAGE_WEIGHT = 0.4
COHERENCE_WEIGHT = 0.3
DIVERSITY_WEIGHT = 0.3

# Visualization settings
MAX_GRAPH_NODES = 25
EDGE_THRESHOLD = 0.1
NODE_PREVIEW_LENGTH = 100
CLUSTER_PREVIEW_LENGTH = 80
CLUSTER_MIN_WORD_LENGTH = 4
TOP_KEYWORDS = 12
KEYWORDS_PER_CLUSTER = 4
MAX_CLUSTERS = 3
CLUSTER_COLORS = ["#3B82F6", "#EF4444", "#10B981", "#F59E0B"]
CENTROID_SEED = None  # Placeholder centroids; set an int for reproducible layouts

# Display settings
SUMMARY_DISPLAY_LENGTH = 200  # Maximum length to display in formatted results
