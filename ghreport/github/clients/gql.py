import abc
import contextlib
import dataclasses
import datetime
import logging
import typing

import aiohttp
import gql
import gql.transport.aiohttp as gql_aiohttp
import gql.transport.exceptions as gql_exceptions
import graphql
import pydantic
import pydantic.alias_generators as pydantic_alias_generators

import ghreport.github.models as github_models
import ghreport.github.pagination as github_pagination
import ghreport.utils.logging as logging_utils
import ghreport.utils.pydantic as pydantic_utils

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"

_RATE_LIMIT_FRAGMENT = """
    rateLimit {
        limit
        cost
        remaining
        resetAt
    }
"""


class BaseRequest(abc.ABC):
    @property
    @abc.abstractmethod
    def document(self) -> graphql.DocumentNode: ...

    @property
    def params(self) -> dict[str, typing.Any]:
        raise NotImplementedError


class BaseModel(pydantic_utils.BaseModel):
    model_config = pydantic.ConfigDict(alias_generator=pydantic_alias_generators.to_camel)


class RateLimit(BaseModel):
    limit: int
    cost: int
    remaining: int
    reset_at: str

    def to_dataclass(self) -> github_models.RateLimit:
        return github_models.RateLimit(
            limit=self.limit,
            cost=self.cost,
            remaining=self.remaining,
            reset_at=self.reset_at,
        )


class PageInfo(BaseModel):
    has_next_page: bool = False
    end_cursor: str | None = None

    def to_dataclass(self) -> github_models.PageInfo:
        return github_models.PageInfo(
            has_next_page=self.has_next_page,
            end_cursor=self.end_cursor,
        )


class BaseResponse(BaseModel):
    rate_limit: RateLimit

    def to_dataclass(self) -> typing.Any:
        raise NotImplementedError


ResponseT = typing.TypeVar("ResponseT", bound=BaseResponse)


@dataclasses.dataclass(frozen=True)
class ListRepositoriesRequest(BaseRequest):
    organization: github_models.OrganizationName
    size: int = 50
    cursor: github_models.Cursor | None = None

    @property
    def document(self) -> graphql.DocumentNode:
        return gql.gql(
            """
            query listRepositories($organization: String!, $size: Int!, $cursor: String) {
                organization(login: $organization) {
                    repositories(first: $size, after: $cursor, affiliations: OWNER) {
                        nodes {
                            name
                        }
                        pageInfo {
                            hasNextPage
                            endCursor
                        }
                        totalCount
                    }
                }
            """
            + _RATE_LIMIT_FRAGMENT
            + "}"
        )

    @property
    def params(self) -> dict[str, typing.Any]:
        return {
            "organization": self.organization,
            "size": self.size,
            "cursor": self.cursor,
        }


@dataclasses.dataclass(frozen=True)
class ListRecentRepositoriesRequest(BaseRequest):
    organization: github_models.OrganizationName
    size: int = 10

    @property
    def document(self) -> graphql.DocumentNode:
        return gql.gql(
            """
            query listRecentRepositories($organization: String!, $size: Int!) {
                organization(login: $organization) {
                    repositories(last: $size, affiliations: OWNER) {
                        nodes {
                            name
                        }
                        pageInfo {
                            hasNextPage
                            endCursor
                        }
                        totalCount
                    }
                }
            """
            + _RATE_LIMIT_FRAGMENT
            + "}"
        )

    @property
    def params(self) -> dict[str, typing.Any]:
        return {
            "organization": self.organization,
            "size": self.size,
        }


class ListRepositoriesResponse(BaseResponse):
    class Organization(BaseModel):
        class Repositories(BaseModel):
            class Repository(BaseModel):
                name: str

            nodes: list[Repository]
            page_info: PageInfo
            total_count: int

        repositories: Repositories

    organization: Organization

    def to_dataclass(self) -> github_models.Page[github_models.RepositoryName]:
        return github_models.Page(
            items=[repository.name for repository in self.organization.repositories.nodes],
            page_info=self.organization.repositories.page_info.to_dataclass(),
            rate_limit=self.rate_limit.to_dataclass(),
        )


@dataclasses.dataclass(frozen=True)
class GetRepositoryActivityRequest(BaseRequest):
    organization: github_models.OrganizationName
    repository: github_models.RepositoryName
    since: datetime.datetime
    size: int = 50

    @property
    def document(self) -> graphql.DocumentNode:
        return gql.gql(
            """
            query getRepositoryActivity(
                $organization: String!
                $repo: String!
                $date: GitTimestamp!
                $date2: DateTime!
                $size: Int!
            ) {
                repository(owner: $organization, name: $repo) {
                    name
                    mergedPR: pullRequests(
                        last: $size
                        states: [MERGED]
                        orderBy: {field: UPDATED_AT, direction: ASC}
                    ) {
                        nodes {
                            number
                            title
                            createdAt
                            mergedAt
                            participants(last: $size) {
                                totalCount
                            }
                        }
                        totalCount
                    }
                    openPR: pullRequests(last: $size, states: [OPEN]) {
                        nodes {
                            number
                            title
                            createdAt
                            mergedAt
                            state
                            participants(last: $size) {
                                totalCount
                            }
                            timeline: timelineItems(since: $date2) {
                                totalCount
                            }
                        }
                        pageInfo {
                            hasNextPage
                            endCursor
                        }
                        totalCount
                    }
                    refs(refPrefix: "refs/heads/", first: $size) {
                        nodes {
                            name
                            target {
                                ... on Commit {
                                    history(first: $size, since: $date) {
                                        nodes {
                                            oid
                                            committedDate
                                            message
                                            author {
                                                name
                                            }
                                        }
                                        totalCount
                                    }
                                }
                            }
                        }
                        totalCount
                    }
                }
            """
            + _RATE_LIMIT_FRAGMENT
            + "}"
        )

    @property
    def params(self) -> dict[str, typing.Any]:
        since = github_models.format_timestamp(self.since)
        return {
            "organization": self.organization,
            "repo": self.repository,
            "date": since,
            "date2": since,
            "size": self.size,
        }


class GetRepositoryActivityResponse(BaseResponse):
    class Repository(BaseModel):
        class PullRequests(BaseModel):
            class PullRequest(BaseModel):
                class Connection(BaseModel):
                    total_count: int

                number: int
                title: str
                created_at: str
                merged_at: str | None = None
                state: github_models.PullRequestState | None = None
                participants: Connection
                timeline: Connection | None = None

            nodes: list[PullRequest]
            total_count: int

        class Refs(BaseModel):
            class Ref(BaseModel):
                class Target(BaseModel):
                    class History(BaseModel):
                        class Commit(BaseModel):
                            class Author(BaseModel):
                                name: str | None = None

                            oid: str
                            committed_date: str
                            message: str
                            author: Author | None = None

                        nodes: list[Commit]
                        total_count: int

                    history: History | None = None

                name: str
                target: Target | None = None

            nodes: list[Ref]
            total_count: int

        name: str
        merged_pr: PullRequests = pydantic.Field(alias="mergedPR")
        open_pr: PullRequests = pydantic.Field(alias="openPR")
        refs: Refs | None = None

    repository: Repository

    @staticmethod
    def _to_pull_request(
        pull_request: Repository.PullRequests.PullRequest,
        default_state: github_models.PullRequestState,
    ) -> github_models.PullRequest:
        return github_models.PullRequest(
            number=pull_request.number,
            title=pull_request.title,
            created_at=pull_request.created_at,
            merged_at=pull_request.merged_at,
            state=pull_request.state or default_state,
            participant_count=pull_request.participants.total_count,
            timeline_count=pull_request.timeline.total_count if pull_request.timeline else 0,
        )

    def _commits(self) -> list[github_models.Commit]:
        if self.repository.refs is None:
            return []

        return [
            github_models.Commit(
                oid=commit.oid,
                committed_date=commit.committed_date,
                message=commit.message,
                ref=ref.name,
                author=commit.author.name if commit.author else None,
            )
            for ref in self.repository.refs.nodes
            if ref.target is not None and ref.target.history is not None
            for commit in ref.target.history.nodes
        ]

    def to_dataclass(self) -> github_models.RepositoryActivity:
        return github_models.RepositoryActivity(
            name=self.repository.name,
            merged_pull_requests=[
                self._to_pull_request(pull_request, github_models.PullRequestState.MERGED)
                for pull_request in self.repository.merged_pr.nodes
            ],
            open_pull_requests=[
                self._to_pull_request(pull_request, github_models.PullRequestState.OPEN)
                for pull_request in self.repository.open_pr.nodes
            ],
            commits=self._commits(),
            rate_limit=self.rate_limit.to_dataclass(),
        )


@dataclasses.dataclass(frozen=True)
class GqlGithubClient:
    token: str
    url: str = GITHUB_GRAPHQL_URL
    timeout: int = 30
    log_sink: logging_utils.LogSink = logging_utils.null_sink

    class BaseError(Exception): ...

    class TransportError(BaseError): ...

    @contextlib.asynccontextmanager
    async def _gql_client(self) -> typing.AsyncGenerator[gql.Client, None]:
        gql_transport = gql_aiohttp.AIOHTTPTransport(
            url=self.url,
            headers={"Authorization": f"Bearer {self.token}"},
            ssl=True,
            timeout=self.timeout,
        )
        gql_client = gql.Client(
            transport=gql_transport,
            fetch_schema_from_transport=False,
            execute_timeout=self.timeout,
        )
        try:
            yield gql_client
        finally:
            await gql_transport.close()

    async def _execute(
        self,
        document: graphql.DocumentNode,
        variable_values: dict[str, typing.Any],
    ) -> dict[str, typing.Any]:
        async with self._gql_client() as gql_client:
            return await gql_client.execute_async(
                document=document,
                variable_values=variable_values,
            )

    async def _request(
        self,
        request: BaseRequest,
        response_model: type[ResponseT],
    ) -> ResponseT:
        logger.debug("Requesting document(%s) params(%s)", request.document, request.params)
        try:
            response = await self._execute(
                document=request.document,
                variable_values=request.params,
            )
        except (gql_exceptions.TransportError, aiohttp.ClientError, TimeoutError) as e:
            logger.error("GraphQL request has failed: %s", e)
            raise self.TransportError(f"GraphQL request has failed: {e}") from e

        try:
            parsed_response = response_model.model_validate(response)
        except pydantic.ValidationError as e:
            logger.error("GraphQL response is malformed: %s", e)
            raise self.TransportError(f"GraphQL response is malformed: {e}") from e

        logging_utils.emit(self.log_sink, f"Credits remaining {parsed_response.rate_limit.remaining}")
        return parsed_response

    async def _list_repositories_page(
        self,
        request: ListRepositoriesRequest,
    ) -> github_models.Page[github_models.RepositoryName]:
        response = await self._request(request, ListRepositoriesResponse)
        return response.to_dataclass()

    async def list_repositories(
        self,
        organization: github_models.OrganizationName,
        size: int = 50,
    ) -> list[github_models.RepositoryName]:
        async def fetch_page(
            cursor: github_models.Cursor | None,
        ) -> github_models.Page[github_models.RepositoryName]:
            return await self._list_repositories_page(
                ListRepositoriesRequest(
                    organization=organization,
                    size=size,
                    cursor=cursor,
                ),
            )

        try:
            return await github_pagination.collect_pages(fetch_page)
        except github_pagination.MissingCursorError as e:
            raise self.TransportError(str(e)) from e

    async def list_recent_repositories(
        self,
        organization: github_models.OrganizationName,
        size: int = 10,
    ) -> list[github_models.RepositoryName]:
        response = await self._request(
            ListRecentRepositoriesRequest(organization=organization, size=size),
            ListRepositoriesResponse,
        )
        return response.to_dataclass().items

    async def get_repository_activity(
        self,
        organization: github_models.OrganizationName,
        repository: github_models.RepositoryName,
        since: datetime.datetime,
        size: int = 50,
    ) -> github_models.RepositoryActivity:
        response = await self._request(
            GetRepositoryActivityRequest(
                organization=organization,
                repository=repository,
                since=since,
                size=size,
            ),
            GetRepositoryActivityResponse,
        )
        return response.to_dataclass()


__all__ = [
    "GITHUB_GRAPHQL_URL",
    "GetRepositoryActivityRequest",
    "GqlGithubClient",
    "ListRecentRepositoriesRequest",
    "ListRepositoriesRequest",
]
