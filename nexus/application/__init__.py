"""Application layer for Nexus.

Services:
    store - WorkspaceStore, the owner of the task and note collections
    identifiers - Two-tier identifier generation
    workspace_service - Dashboard summary and storage-usage estimate
    bootstrap - Builds and loads a store for the view layer

Example usage:
    >>> from nexus.application import open_session_workspace
    >>> from nexus.domain.task import TaskPriority
    >>>
    >>> store = open_session_workspace()
    >>> task = store.add_task("Buy milk", "", TaskPriority.MEDIUM)
    >>> store.tasks[0].title
    'Buy milk'
"""

from nexus.application.bootstrap import open_session_workspace, open_store, open_workspace
from nexus.application.identifiers import IdGenerator
from nexus.application.store import WorkspaceSnapshot, WorkspaceStore, epoch_millis
from nexus.application.workspace_service import (
    StorageUsage,
    WorkspaceSummary,
    estimate_storage_bytes,
    estimate_storage_usage,
    summarize_workspace,
)

__all__ = [
    # Store
    "WorkspaceStore",
    "WorkspaceSnapshot",
    "IdGenerator",
    "epoch_millis",
    # Start-up
    "open_store",
    "open_workspace",
    "open_session_workspace",
    # Workspace service
    "StorageUsage",
    "WorkspaceSummary",
    "estimate_storage_bytes",
    "estimate_storage_usage",
    "summarize_workspace",
]
