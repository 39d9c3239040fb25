"""
Configuration settings for the littlesearch index and query engine.
"""

# Characters stripped from the edges of a word; a word containing one of
# them between its first and last letter is not a keyword.
PUNCTUATION = ".,?:;!-'(){}[]"

# Maximum number of documents returned by a search
TOP_K = 5

# Documents with these suffixes are parsed as HTML before tokenizing
HTML_SUFFIXES = (".html", ".htm")

# Tried in order when reading a document from disk; latin-1 accepts any bytes
FILE_ENCODINGS = ("utf-8", "cp1252", "latin-1")

# Default collaborator files (one name / word per whitespace-separated token)
DEFAULT_DOCS_FILE = "docs.txt"
DEFAULT_NOISE_WORDS_FILE = "noisewords.txt"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
