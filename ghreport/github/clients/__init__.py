from .gql import (
    GITHUB_GRAPHQL_URL,
    GetRepositoryActivityRequest,
    GqlGithubClient,
    ListRecentRepositoriesRequest,
    ListRepositoriesRequest,
)

__all__ = [
    "GITHUB_GRAPHQL_URL",
    "GetRepositoryActivityRequest",
    "GqlGithubClient",
    "ListRecentRepositoriesRequest",
    "ListRepositoriesRequest",
]
