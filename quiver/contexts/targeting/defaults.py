"""
Default policy constants for the Targeting context.

These are tuning knobs, not derived values. TargetingConfig is built from them
and a YAML file may override any of them (see config.py).
"""

# Fusion weights for the three relevance signals
SEMANTIC_WEIGHT = 0.4
LEXICAL_WEIGHT = 0.3
GRAPH_WEIGHT = 0.3

# Lines scoring below this are never selected
MINIMUM_RELEVANCE_SCORE = 0.2

# Most lines kept per category after thresholding
MAX_LINES_PER_CATEGORY = 4

# Denominator floor for cosine similarity
COSINE_EPSILON = 1e-10

# Emphasis markup wrapped around highlighted skill terms (Typst strong)
EMPHASIS_TEMPLATE = "#strong[{}]"

# Collaborator models
EMBEDDING_MODEL = "sentence-transformers/all-MiniLM-L6-v2"
NER_MODEL = "en_core_web_sm"

# Threads used to precompute candidate-line embeddings (1 = sequential)
MAX_WORKERS = 1

# Closed vocabulary of skill terms recognized among job-description entities
COMMON_SKILL_TERMS = (
    "rust",
    "python",
    "java",
    "c++",
    "javascript",
    "aws",
    "azure",
    "gcp",
    "docker",
    "kubernetes",
    "sql",
    "nosql",
    "linux",
    "machine learning",
    "nlp",
    "data analysis",
    "react",
    "angular",
    "vue",
    "systems architecture",
    "policy analysis",
    "legislative monitoring",
    "legal reasoning",
    "project management",
    "business management",
    "nix",
    "lobbying",
)
