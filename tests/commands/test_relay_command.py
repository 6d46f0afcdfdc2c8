import httpx
import pytest

from src.commands.impl.relay_command import RelayCommand, is_missing_command
from src.commands.interfaces.command_context import CommandContext
from src.commands.interfaces.command_result import CommandStatus
from src.config.relay_settings import RelaySettings
from tests.helpers import MockWebhook, TEST_WEBHOOK_URL


@pytest.fixture
def relay_context(
    relay_settings: RelaySettings, mock_webhook: MockWebhook, unique_request_id: str
) -> CommandContext:
    """Command context wired to the mock webhook"""
    return CommandContext(
        request_id=unique_request_id,
        settings=relay_settings,
        http_client=mock_webhook.client(),
        command="START",
    )


class TestIsMissingCommand:
    @pytest.mark.parametrize("value", [None, "", False, 0, 0.0, float("nan")])
    def test_missing_values(self, value) -> None:
        assert is_missing_command(value) is True

    @pytest.mark.parametrize(
        "value", ["START", " ", True, 1, -2.5, [], {}, ["START"], {"a": 1}]
    )
    def test_present_values(self, value) -> None:
        assert is_missing_command(value) is False


class TestRelayCommand:
    """Test suite for RelayCommand"""

    def test_command_properties(self) -> None:
        command = RelayCommand()

        assert command.get_command_name() == "relay_command"
        assert command.supports_retry() is False
        assert "relay_command" in repr(command)

    def test_validate_context_success(self, relay_context: CommandContext) -> None:
        assert RelayCommand().validate_context(relay_context) is True

    def test_validate_context_missing_command(
        self, relay_context: CommandContext
    ) -> None:
        relay_context.command = ""
        assert RelayCommand().validate_context(relay_context) is False

    def test_validate_context_missing_client(
        self, relay_context: CommandContext
    ) -> None:
        relay_context.http_client = None
        assert RelayCommand().validate_context(relay_context) is False

    @pytest.mark.asyncio
    async def test_execute_success(
        self, relay_context: CommandContext, mock_webhook: MockWebhook
    ) -> None:
        result = await RelayCommand().execute(relay_context)

        assert result.status == CommandStatus.SUCCESS
        assert result.is_success() is True
        assert result.request_id == relay_context.request_id
        assert result.command_name == "relay_command"
        assert result.data == {"result": "ok"}
        assert result.metadata == {"remote_status_code": 200}
        assert result.execution_time_ms >= 0

        assert mock_webhook.call_count == 1
        assert str(mock_webhook.requests[0].url) == TEST_WEBHOOK_URL
        assert mock_webhook.sent_json() == {"command": "START"}

    @pytest.mark.asyncio
    async def test_execute_network_error(
        self, relay_context: CommandContext, mock_webhook: MockWebhook
    ) -> None:
        mock_webhook.error = httpx.ConnectError("network down")

        result = await RelayCommand().execute(relay_context)

        assert result.is_failure() is True
        assert result.error_message == "network down"
        assert result.error_details == {"error_type": "ConnectError"}
        assert mock_webhook.call_count == 1

    @pytest.mark.asyncio
    async def test_execute_non_json_response(
        self, relay_context: CommandContext, mock_webhook: MockWebhook
    ) -> None:
        mock_webhook.raw_body = b"not json"

        result = await RelayCommand().execute(relay_context)

        assert result.is_failure() is True
        assert result.error_message
        assert result.error_details["error_type"] == "JSONDecodeError"

    @pytest.mark.asyncio
    async def test_execute_rejects_nan_in_response(
        self, relay_context: CommandContext, mock_webhook: MockWebhook
    ) -> None:
        mock_webhook.raw_body = b'{"value": NaN}'

        result = await RelayCommand().execute(relay_context)

        assert result.is_failure() is True
        assert result.error_message == "Invalid JSON constant NaN"
        assert result.error_details == {"error_type": "ValueError"}

    @pytest.mark.asyncio
    async def test_execute_invalid_context_makes_no_call(
        self, relay_context: CommandContext, mock_webhook: MockWebhook
    ) -> None:
        relay_context.command = None

        result = await RelayCommand().execute(relay_context)

        assert result.is_failure() is True
        assert result.error_message == "Invalid relay context"
        assert mock_webhook.call_count == 0

    @pytest.mark.asyncio
    async def test_run_logs_hooks(
        self, relay_context: CommandContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("INFO"):
            result = await RelayCommand().run(relay_context)

        assert result.is_success() is True
        messages = [record.getMessage() for record in caplog.records]
        assert any("Executing command 'relay_command'" in m for m in messages)
        assert any("completed successfully" in m for m in messages)
