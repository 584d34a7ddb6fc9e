"""Institution attribution — operator introductions, titles, normalization."""

from callqa.attribution.normalize import normalize_company, normalize_person_name
from callqa.attribution.operator import AttributionPolicy, OperatorAttributionExtractor
from callqa.attribution.title import extract_company_from_title

__all__ = [
    "AttributionPolicy",
    "OperatorAttributionExtractor",
    "extract_company_from_title",
    "normalize_company",
    "normalize_person_name",
]
