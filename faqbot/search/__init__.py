"""Solr question-answering search module."""

from .models import QueryTarget, SearchDocument
from .query import QueryBuilder
from .reconciler import ResponseReconciler
from .transport import SolrTransport

__all__ = ["QueryBuilder", "QueryTarget", "ResponseReconciler", "SearchDocument", "SolrTransport"]
