from services.merge import MergeService
from services.records import RecordBuilder
from services.update import UpdateService


def create_services(settings, http_client=None) -> tuple[MergeService, UpdateService]:
    """Factory function to create merge and update services sharing one lock registry."""
    from infrastructure.document_store import DocumentStore
    from infrastructure.http_client import AsyncHTTPClient
    from infrastructure.leetcode_client import LeetCodeStatsClient
    from infrastructure.locks import DatasetLocks
    from infrastructure.roster_store import RosterStore

    # Create infrastructure dependencies
    if http_client is None:
        http_client = AsyncHTTPClient(timeout=settings.request_timeout)
    stats_client = LeetCodeStatsClient(
        http_client,
        graphql_url=settings.graphql_url,
        recent_limit=settings.recent_submission_limit,
    )
    roster_store = RosterStore(settings.roster_root)
    document_store = DocumentStore(settings.documents_dir)
    record_builder = RecordBuilder(stats_client=stats_client)
    locks = DatasetLocks()

    merge_service = MergeService(
        roster_store=roster_store,
        document_store=document_store,
        record_builder=record_builder,
        locks=locks,
        datasets=settings.datasets,
        fetch_concurrency=settings.fetch_concurrency,
    )
    update_service = UpdateService(
        roster_store=roster_store,
        document_store=document_store,
        record_builder=record_builder,
        locks=locks,
        datasets=settings.datasets,
    )
    return merge_service, update_service


__all__ = ["MergeService", "RecordBuilder", "UpdateService", "create_services"]
