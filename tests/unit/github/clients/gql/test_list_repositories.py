import unittest.mock

import gql.transport.exceptions as gql_exceptions
import pytest

import ghreport.github.clients as github_clients
import tests.responses as test_responses


@pytest.mark.asyncio
async def test_list_repositories(
    github_gql_client: github_clients.GqlGithubClient,
    execute: unittest.mock.AsyncMock,
    sink_messages: list[str],
):
    execute.side_effect = [
        test_responses.repositories_page(["a", "b"], has_next_page=True, end_cursor="cursor-1"),
        test_responses.repositories_page(["c", "d"], has_next_page=True, end_cursor="cursor-2"),
        test_responses.repositories_page(["e"]),
    ]

    repositories = await github_gql_client.list_repositories("acme")

    assert repositories == ["a", "b", "c", "d", "e"]
    cursors = [call.kwargs["variable_values"]["cursor"] for call in execute.call_args_list]
    assert cursors == [None, "cursor-1", "cursor-2"]
    assert all(call.kwargs["variable_values"]["size"] == 50 for call in execute.call_args_list)
    assert all(call.kwargs["variable_values"]["organization"] == "acme" for call in execute.call_args_list)
    assert sink_messages == ["Credits remaining 4321"] * 3


@pytest.mark.asyncio
async def test_list_repositories_page_failure(
    github_gql_client: github_clients.GqlGithubClient,
    execute: unittest.mock.AsyncMock,
):
    execute.side_effect = [
        test_responses.repositories_page(["a"], has_next_page=True, end_cursor="cursor-1"),
        gql_exceptions.TransportServerError("Bad gateway", 502),
    ]

    with pytest.raises(github_clients.GqlGithubClient.TransportError) as exc_info:
        await github_gql_client.list_repositories("acme")

    assert isinstance(exc_info.value.__cause__, gql_exceptions.TransportServerError)


@pytest.mark.asyncio
async def test_list_repositories_missing_cursor(
    github_gql_client: github_clients.GqlGithubClient,
    execute: unittest.mock.AsyncMock,
):
    execute.return_value = test_responses.repositories_page(["a"], has_next_page=True)

    with pytest.raises(github_clients.GqlGithubClient.TransportError):
        await github_gql_client.list_repositories("acme")


@pytest.mark.asyncio
async def test_list_repositories_page_without_has_next_page(
    github_gql_client: github_clients.GqlGithubClient,
    execute: unittest.mock.AsyncMock,
):
    page = test_responses.repositories_page(["a", "b"])
    del page["organization"]["repositories"]["pageInfo"]["hasNextPage"]
    execute.return_value = page

    repositories = await github_gql_client.list_repositories("acme")

    assert repositories == ["a", "b"]
    execute.assert_awaited_once()


@pytest.mark.asyncio
async def test_list_recent_repositories(
    github_gql_client: github_clients.GqlGithubClient,
    execute: unittest.mock.AsyncMock,
    sink_messages: list[str],
):
    execute.return_value = test_responses.repositories_page(["x", "y"], has_next_page=True, end_cursor="cursor-1")

    repositories = await github_gql_client.list_recent_repositories("acme")

    assert repositories == ["x", "y"]
    execute.assert_awaited_once()
    assert execute.call_args.kwargs["variable_values"] == {"organization": "acme", "size": 10}
    assert sink_messages == ["Credits remaining 4321"]


@pytest.mark.asyncio
async def test_graphql_error_payload(
    github_gql_client: github_clients.GqlGithubClient,
    execute: unittest.mock.AsyncMock,
):
    execute.side_effect = gql_exceptions.TransportQueryError(
        "Could not resolve to an Organization with the login of 'acme'."
    )

    with pytest.raises(github_clients.GqlGithubClient.TransportError):
        await github_gql_client.list_recent_repositories("acme")


@pytest.mark.asyncio
async def test_timeout(
    github_gql_client: github_clients.GqlGithubClient,
    execute: unittest.mock.AsyncMock,
):
    execute.side_effect = TimeoutError()

    with pytest.raises(github_clients.GqlGithubClient.TransportError):
        await github_gql_client.list_recent_repositories("acme")


@pytest.mark.asyncio
async def test_malformed_response(
    github_gql_client: github_clients.GqlGithubClient,
    execute: unittest.mock.AsyncMock,
    sink_messages: list[str],
):
    execute.return_value = {"organization": None, "rateLimit": {"remaining": 1}}

    with pytest.raises(github_clients.GqlGithubClient.TransportError):
        await github_gql_client.list_recent_repositories("acme")

    assert sink_messages == []


@pytest.mark.asyncio
async def test_failing_sink_does_not_fail_request(execute: unittest.mock.AsyncMock):
    def failing_sink(message: str) -> None:
        raise RuntimeError("sink is broken")

    client = github_clients.GqlGithubClient(token="test_token", log_sink=failing_sink)
    execute.return_value = test_responses.repositories_page(["a"])

    assert await client.list_recent_repositories("acme") == ["a"]
