import typing

import ghreport.github.models as github_models


class ReportError(Exception):
    def __init__(self, message: str, *args: typing.Any) -> None:
        super().__init__(message, *args)
        self.message = message


class RepositoryListingError(ReportError):
    def __init__(self, organization: github_models.OrganizationName) -> None:
        super().__init__(f"An error occurred during repositories listing of {organization}")
        self.organization = organization


class RepositoryFetchError(ReportError):
    def __init__(self, repository: github_models.RepositoryName) -> None:
        super().__init__(f"An error occurred during report for {repository}")
        self.repository = repository


__all__ = [
    "ReportError",
    "RepositoryFetchError",
    "RepositoryListingError",
]
