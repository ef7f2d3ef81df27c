"""FAQ bot answering questions from a Solr question-answering collection."""

__version__ = "0.1.0"
