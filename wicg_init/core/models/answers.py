"""
Answer record — everything the templates can be populated with.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AnswerRecord(BaseModel):
    """The consolidated answers gathered by the collection pipeline.

    Fields are stored snake_case and exposed to templates under their
    camelCase placeholder names (``{{projectName}}``, ``{{affiliationURL}}``).
    Built once at the end of collection and never mutated.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    repo_name: str = Field(alias="repoName")
    project_name: str = Field(alias="projectName")
    user_name: str = Field(default="", alias="userName")
    user_email: str = Field(default="", alias="userEmail")
    affiliation: str = Field(default="", alias="affiliation")
    affiliation_url: str = Field(default="", alias="affiliationURL")
    main_branch: str = Field(alias="mainBranch")
    needs_git_init: bool = Field(default=False, alias="needsGitInit")

    def as_template_values(self) -> dict[str, Any]:
        """Placeholder name → value mapping used for substitution."""
        return self.model_dump(by_alias=True)
