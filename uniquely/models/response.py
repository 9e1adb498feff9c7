from pydantic import BaseModel

from uniquely.models.validation import RunSummary


class CacheStatus(BaseModel):
    size: int


class ValidateCorpusResponse(RunSummary):
    cache_size: int
    """Number of pages held in the corpus cache after the run."""
