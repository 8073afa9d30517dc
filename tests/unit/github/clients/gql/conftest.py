import unittest.mock

import pytest
import pytest_mock

import ghreport.github.clients as github_clients


@pytest.fixture(name="sink_messages")
def sink_messages_fixture() -> list[str]:
    return []


@pytest.fixture(name="execute")
def execute_fixture(mocker: pytest_mock.MockerFixture) -> unittest.mock.AsyncMock:
    return mocker.patch.object(github_clients.GqlGithubClient, "_execute", new_callable=mocker.AsyncMock)


@pytest.fixture(name="github_gql_client")
def github_gql_client_fixture(
    execute: unittest.mock.AsyncMock,
    sink_messages: list[str],
) -> github_clients.GqlGithubClient:
    return github_clients.GqlGithubClient(token="test_token", log_sink=sink_messages.append)
