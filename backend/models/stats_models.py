from pydantic import BaseModel


class SummaryStats(BaseModel):
    total_records: int
    # NaN when there are no records
    avg_intensity: float
    avg_relevance: float
    avg_likelihood: float
