"""Constants used throughout the StripTrease package."""

PROGRAM_NAME = "StripTrease"
VERSION = "0.1"
AUTHOR = "Joseph W. Brown"
AFFILIATION = "University of Michigan"
CONTACT = "josephwb@umich.edu"
RELEASE_DATE = "November, 2013"

# First token of a Nexus tree statement
TREE_KEYWORD = "tree"

# Characters that may make up a nodal support value (integer or float)
SUPPORT_VALUE_CHARACTERS = frozenset("0123456789.")

ANNOTATION_OPEN = "["
ANNOTATION_CLOSE = "]"

# Output file name when -out is not given: prefix + input file name
DEFAULT_OUTPUT_PREFIX = "Stripped-"

# Fixed-name report written to the working directory on fatal I/O errors
ERROR_REPORT_FILENAME = "Error.StripTrease.txt"

# Tree files are read and written as UTF-8; undecodable bytes (e.g. Latin-1
# taxon names) round-trip unchanged
TREE_FILE_ENCODING = "utf-8"
TREE_FILE_ERRORS = "surrogateescape"
