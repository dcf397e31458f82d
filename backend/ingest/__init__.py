"""Loading of lexicon data files into record sets."""
from ingest.lexicon import LexiconFiles, load_file, load_lexicon

__all__ = ["LexiconFiles", "load_file", "load_lexicon"]
