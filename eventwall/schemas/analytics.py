from eventwall.schemas.base import CamelModel


class AnalyticsResponse(CamelModel):
    id: int
    event_id: int
    date: str
    uploads: int
    views: int
    qr_scans: int
    approved: int
    rejected: int
    archived: int


class StatsResponse(CamelModel):
    uploads: int = 0
    views: int = 0
    qr_scans: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0
    archived: int = 0
    total_uploads: int = 0
