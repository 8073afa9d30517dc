import datetime
import typing

import ghreport.github.models as github_models


class GithubReportClientProtocol(typing.Protocol):
    async def list_repositories(
        self,
        organization: github_models.OrganizationName,
        size: int = ...,
    ) -> list[github_models.RepositoryName]: ...

    async def list_recent_repositories(
        self,
        organization: github_models.OrganizationName,
        size: int = ...,
    ) -> list[github_models.RepositoryName]: ...

    async def get_repository_activity(
        self,
        organization: github_models.OrganizationName,
        repository: github_models.RepositoryName,
        since: datetime.datetime,
        size: int = ...,
    ) -> github_models.RepositoryActivity: ...


__all__ = [
    "GithubReportClientProtocol",
]
