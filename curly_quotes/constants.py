SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'

LEFT_SINGLE_QUOTE = "\u2018"  # ‘
RIGHT_SINGLE_QUOTE = "\u2019"  # ’
LEFT_DOUBLE_QUOTE = "\u201c"  # “
RIGHT_DOUBLE_QUOTE = "\u201d"  # ”

DEFAULT_QUOTE_OPTIONS = {
    "single-opening": LEFT_SINGLE_QUOTE,
    "single-closing": RIGHT_SINGLE_QUOTE,
    "double-opening": LEFT_DOUBLE_QUOTE,
    "double-closing": RIGHT_DOUBLE_QUOTE,
}

SCRIPT_SUFFIXES = (".js", ".jsx", ".mjs", ".cjs")
VUE_SUFFIXES = (".vue",)

SKIP_DIRECTORIES = {"node_modules", "dist", "build", "coverage", "__pycache__"}

DEFAULT_CONFIG_FILE = ".curly-quotes.yml"

MAX_FIX_PASSES = 10
