"""Payload helpers for GitLab pipeline webhooks in tests."""

from collections.abc import Sequence
from typing import Any


def runner(
    *,
    runner_id: int = 1,
    description: str = "runner.gitlab.com",
) -> dict[str, Any]:
    """Create a runner payload."""
    return {
        "id": runner_id,
        "description": description,
        "runner_type": "instance_type",
        "active": True,
        "is_shared": True,
        "tags": ["docker"],
    }


def build(
    *,
    build_id: int = 380,
    stage: str = "build",
    name: str = "build-image",
    status: str = "success",
    created_at: str = "2020-02-15 15:23:28 UTC",
    started_at: str | None = "2020-02-15 15:26:12 UTC",
    finished_at: str | None = "2020-02-15 15:26:29 UTC",
    runner_payload: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a build payload as found in the ``builds`` list of a pipeline hook.

    Pass ``started_at=None`` or ``finished_at=None`` for builds that did not
    run to completion, GitLab sends explicit nulls for those.
    """
    return {
        "id": build_id,
        "stage": stage,
        "name": name,
        "status": status,
        "created_at": created_at,
        "started_at": started_at,
        "finished_at": finished_at,
        "duration": 17.1,
        "queued_duration": 1.2,
        "failure_reason": None,
        "when": "on_success",
        "manual": False,
        "allow_failure": False,
        "user": {
            "id": 1,
            "name": "Administrator",
            "username": "root",
            "avatar_url": "http://www.gravatar.com/avatar/e32bd13e2add097461cb96824b7a829c",
            "email": "admin@example.com",
        },
        "runner": runner() if runner_payload is None else runner_payload,
        "artifacts_file": {"filename": None, "size": None},
        "environment": None,
    }


def pipeline_hook(
    *,
    pipeline_id: int = 31,
    status: str = "success",
    ref: str = "main",
    created_at: str | None = "2020-02-15 15:23:28 UTC",
    finished_at: str | None = "2020-02-15 15:30:00 UTC",
    builds: Sequence[dict[str, Any]] = (),
    merge_request: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a ``Pipeline Hook`` payload for testing.

    Returns a realistic GitLab pipeline webhook body. ``merge_request`` is
    null unless given, as for a pipeline triggered by a push.
    """
    return {
        "object_kind": "pipeline",
        "object_attributes": {
            "id": pipeline_id,
            "iid": 3,
            "ref": ref,
            "tag": False,
            "sha": "bcbb5ec396a2c0f828686f14fac9b80b780504f2",
            "before_sha": "bcbb5ec396a2c0f828686f14fac9b80b780504f2",
            "source": "merge_request_event" if merge_request else "push",
            "status": status,
            "detailed_status": "passed",
            "stages": ["build", "test", "deploy"],
            "created_at": created_at,
            "finished_at": finished_at,
            "duration": 63,
            "queued_duration": 12,
            "variables": [{"key": "NESTOR_PROD_ENVIRONMENT", "value": "us-west-1"}],
            "url": f"http://example.com/gitlab-org/gitlab-test/-/pipelines/{pipeline_id}",
        },
        "merge_request": merge_request,
        "user": {
            "id": 1,
            "name": "Administrator",
            "username": "root",
            "avatar_url": "http://www.gravatar.com/avatar/e32bd13e2add097461cb96824b7a829c",
            "email": "user_email@gitlab.com",
        },
        "project": {
            "id": 1,
            "name": "Gitlab Test",
            "description": "Atque in sunt eos similique dolores voluptatem.",
            "web_url": "http://example.com/gitlab-org/gitlab-test",
            "avatar_url": None,
            "git_ssh_url": "git@example.com:gitlab-org/gitlab-test.git",
            "git_http_url": "http://example.com/gitlab-org/gitlab-test.git",
            "namespace": "Gitlab Org",
            "visibility_level": 20,
            "path_with_namespace": "gitlab-org/gitlab-test",
            "default_branch": "master",
        },
        "commit": {
            "id": "bcbb5ec396a2c0f828686f14fac9b80b780504f2",
            "message": "test\n",
            "title": "test",
            "timestamp": "2016-08-12T17:23:21+02:00",
            "url": "http://example.com/gitlab-org/gitlab-test/commit/bcbb5ec396a2c0f828686f14fac9b80b780504f2",
            "author": {"name": "User", "email": "user@gitlab.com"},
        },
        "builds": list(builds),
    }


def merge_request(
    *,
    mr_id: int = 1,
    title: str = "Test",
    url: str = "http://192.168.64.1:3005/gitlab-org/gitlab-test/merge_requests/1",
) -> dict[str, Any]:
    """Create the merge request section of a pipeline hook."""
    return {
        "id": mr_id,
        "iid": 1,
        "title": title,
        "source_branch": "test",
        "source_project_id": 1,
        "target_branch": "master",
        "target_project_id": 1,
        "state": "opened",
        "merge_status": "can_be_merged",
        "detailed_merge_status": "mergeable",
        "url": url,
    }
