"""Service-Modul: API-Abruf, Speicherung und Pipeline."""

from services.retrieval import CourseRetrievalService, RetrievalFailure, ResponseDecodeError
from services.storage import CourseStorageService
from services.pipeline import RetrievalReport, filter_active, retrieve_and_store

__all__ = [
    "CourseRetrievalService",
    "RetrievalFailure",
    "ResponseDecodeError",
    "CourseStorageService",
    "RetrievalReport",
    "filter_active",
    "retrieve_and_store",
]
