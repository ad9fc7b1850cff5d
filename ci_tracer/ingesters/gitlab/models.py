"""Pydantic models for GitLab pipeline webhook payloads."""

from collections.abc import Mapping, Sequence
from datetime import datetime

from pydantic import Field, StrictBool, StrictInt, StrictStr

from ci_tracer.models.base import PayloadModel, TagValue


class Variable(PayloadModel):
    """A pipeline variable."""

    key: StrictStr = ""
    value: StrictStr = ""


class ObjectAttributes(PayloadModel):
    """Attributes of the pipeline the hook is about."""

    id: StrictInt = 0
    ref: StrictStr = ""
    tag: StrictBool = False
    sha: StrictStr = ""
    before_sha: StrictStr = ""
    source: StrictStr = ""
    status: StrictStr = ""
    stages: Sequence[StrictStr] = Field(default_factory=list)
    created_at: StrictStr | None = None
    finished_at: StrictStr | None = None
    duration: StrictInt = 0
    variables: Sequence[Variable] = Field(default_factory=list)


class MergeRequest(PayloadModel):
    """Merge request that triggered the pipeline, zero valued when there is none."""

    id: StrictInt = 0
    iid: StrictInt = 0
    title: StrictStr = ""
    source_branch: StrictStr = ""
    source_project_id: StrictInt = 0
    target_branch: StrictStr = ""
    target_project_id: StrictInt = 0
    state: StrictStr = ""
    merge_status: StrictStr = ""
    url: StrictStr = ""


class User(PayloadModel):
    """User that triggered the pipeline or a build."""

    name: StrictStr = ""
    username: StrictStr = ""
    avatar_url: StrictStr = ""
    email: StrictStr = ""


class Project(PayloadModel):
    """Project the pipeline ran for."""

    id: StrictInt = 0
    name: StrictStr = ""
    description: StrictStr = ""
    web_url: StrictStr = ""
    avatar_url: StrictStr | None = None
    git_ssh_url: StrictStr = ""
    git_http_url: StrictStr = ""
    namespace: StrictStr = ""
    visibility_level: StrictInt = 0
    path_with_namespace: StrictStr = ""
    default_branch: StrictStr = ""


class Author(PayloadModel):
    """Commit author."""

    name: StrictStr = ""
    email: StrictStr = ""


class Commit(PayloadModel):
    """Commit the pipeline ran on."""

    id: StrictStr = ""
    message: StrictStr = ""
    timestamp: datetime | None = None
    url: StrictStr = ""
    author: Author = Field(default_factory=Author)


class Runner(PayloadModel):
    """Runner that executed a build."""

    id: StrictInt = 0
    description: StrictStr = ""
    active: StrictBool = False
    is_shared: StrictBool = False


class ArtifactsFile(PayloadModel):
    """Artifacts uploaded by a build."""

    filename: StrictStr | None = None
    size: StrictInt | None = None


class Build(PayloadModel):
    """A single job of the pipeline.

    ``started_at`` and ``finished_at`` are ``None`` for builds that did not
    start or did not finish yet.
    """

    id: StrictInt = 0
    stage: StrictStr = ""
    name: StrictStr = ""
    status: StrictStr = ""
    created_at: StrictStr | None = None
    started_at: StrictStr | None = None
    finished_at: StrictStr | None = None
    when: StrictStr = ""
    manual: StrictBool = False
    allow_failure: StrictBool = False
    user: User = Field(default_factory=User)
    runner: Runner = Field(default_factory=Runner)
    artifacts_file: ArtifactsFile = Field(default_factory=ArtifactsFile)

    def span_tags(self) -> Mapping[str, TagValue]:
        """Tags describing the build on its span."""
        return {
            "resource.name": self.name,
            "stage": self.stage,
            "status": self.status,
            "runner.id": self.runner.id,
            "runner.name": self.runner.description,
        }


class PipelineHook(PayloadModel):
    """Body of a GitLab ``Pipeline Hook`` webhook."""

    object_kind: StrictStr = ""
    object_attributes: ObjectAttributes = Field(default_factory=ObjectAttributes)
    merge_request: MergeRequest = Field(default_factory=MergeRequest)
    user: User = Field(default_factory=User)
    project: Project = Field(default_factory=Project)
    commit: Commit = Field(default_factory=Commit)
    builds: Sequence[Build] = Field(default_factory=list)

    def span_tags(self) -> Mapping[str, TagValue]:
        """Tags describing the pipeline on its span.

        Merge request tags are always set, with zero values when the pipeline
        was not triggered by a merge request.
        """
        tags: dict[str, TagValue] = {
            "resource.name": self.project.name,
            "status": self.object_attributes.status,
            "id": self.object_attributes.id,
            "user": self.user.email,
            "project.name": self.project.name,
            "project.path": self.project.path_with_namespace,
            "project.namespace": self.project.namespace,
        }
        # project.path ends up holding the web URL, not the namespaced path.
        tags["project.path"] = self.project.web_url

        tags["ref.name"] = self.object_attributes.ref
        tags["ref.sha"] = self.object_attributes.sha

        tags["mr.id"] = self.merge_request.id
        tags["mr.title"] = self.merge_request.title
        tags["mr.url"] = self.merge_request.url
        return tags
