import datetime

import pytest

import ghreport.github.clients as github_clients
import tests.settings as test_settings


@pytest.mark.asyncio
async def test_list_repositories(
    github_gql_client: github_clients.GqlGithubClient,
    settings: test_settings.Settings,
):
    repositories = await github_gql_client.list_repositories(settings.github_organization)

    assert len(repositories) > 0
    assert len(set(repositories)) == len(repositories)


@pytest.mark.asyncio
async def test_list_recent_repositories(
    github_gql_client: github_clients.GqlGithubClient,
    settings: test_settings.Settings,
):
    repositories = await github_gql_client.list_recent_repositories(settings.github_organization, size=3)

    assert 0 < len(repositories) <= 3


@pytest.mark.asyncio
async def test_get_repository_activity(
    github_gql_client: github_clients.GqlGithubClient,
    settings: test_settings.Settings,
):
    repositories = await github_gql_client.list_recent_repositories(settings.github_organization, size=1)
    since = datetime.datetime.now(tz=datetime.UTC) - datetime.timedelta(days=7)

    activity = await github_gql_client.get_repository_activity(settings.github_organization, repositories[0], since)

    assert activity.name == repositories[0]
    assert activity.rate_limit is not None
    assert all(pull_request.merged_at is not None for pull_request in activity.merged_pull_requests)


@pytest.mark.asyncio
async def test_unknown_organization(github_gql_client: github_clients.GqlGithubClient):
    with pytest.raises(github_clients.GqlGithubClient.TransportError):
        await github_gql_client.list_recent_repositories("definetly-not-a-real-org")
