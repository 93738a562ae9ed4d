import asyncio
from typing import Any, Dict, List, Optional, Set

import httpx
import structlog

from weather_assistant.config.config import config
from weather_assistant.exceptions.telegram import TelegramServiceError, TelegramTokenError

logger = structlog.get_logger(__name__)

WELCOME_MESSAGE = (
    "👋 Weather assistant welcomes you!\n\n"
    "Ask about the weather in any city, for example: \"What's the weather in London?\""
)


class TelegramService:
    """
    Telegram bot front end for the weather agent.

    Updates are fetched with long polling against the Bot API. Every text
    message is answered in its own task, so one slow query never holds up
    the other chats.
    """

    def __init__(
            self,
            agent,
            token: Optional[str] = None,
            base_url: Optional[str] = None,
            poll_timeout: Optional[int] = None,
            retry_delay: float = 5.0,
    ):
        token = token or config.telegram_bot_token
        if not token:
            raise TelegramTokenError(
                "TELEGRAM_BOT_TOKEN is required to run the assistant in 'telegram' mode"
            )

        self.agent = agent
        self.api_url = f"{(base_url or config.telegram_api_base_url).rstrip('/')}/bot{token}"
        self.poll_timeout = config.telegram_poll_timeout if poll_timeout is None else poll_timeout
        self.retry_delay = retry_delay
        self.offset: Optional[int] = None
        self._tasks: Set[asyncio.Task] = set()

    async def _call(self, client: httpx.AsyncClient, method: str, **payload) -> Any:
        """
        Call a Bot API method and return its `result`.

        Raises:
            TelegramServiceError: If the request fails or Telegram reports an error
        """
        try:
            response = await client.post(f"{self.api_url}/{method}", json=payload)
            data = response.json()
        except httpx.HTTPError as e:
            raise TelegramServiceError(f"Telegram API call {method} failed: {str(e)}")
        except ValueError:
            raise TelegramServiceError(
                f"Telegram API call {method} returned invalid JSON (status {response.status_code})"
            )

        if not isinstance(data, dict):
            raise TelegramServiceError(f"Telegram API call {method} returned an unexpected body: {data!r}")

        if response.status_code != 200 or not data.get("ok"):
            raise TelegramServiceError(
                f"Telegram API call {method} failed: {data.get('description', response.status_code)}"
            )

        return data.get("result")

    async def get_updates(self, client: httpx.AsyncClient) -> List[Dict[str, Any]]:
        payload: Dict[str, Any] = {"timeout": self.poll_timeout, "allowed_updates": ["message"]}
        if self.offset is not None:
            payload["offset"] = self.offset
        return await self._call(client, "getUpdates", **payload) or []

    async def send_message(self, client: httpx.AsyncClient, chat_id: int, text: str):
        return await self._call(client, "sendMessage", chat_id=chat_id, text=text)

    async def send_typing(self, client: httpx.AsyncClient, chat_id: int):
        return await self._call(client, "sendChatAction", chat_id=chat_id, action="typing")

    async def handle_update(self, client: httpx.AsyncClient, update: Dict[str, Any]):
        """Answer a single update; commands other than /start are ignored."""
        message = update.get("message") or {}
        text = message.get("text")
        chat_id = (message.get("chat") or {}).get("id")

        if not text or chat_id is None:
            return

        try:
            if text.startswith("/start"):
                await self.send_message(client, chat_id, WELCOME_MESSAGE)
                return

            if text.startswith("/"):
                return

            await self.send_typing(client, chat_id)
            response = await self.agent.process_query(text, origin=f"telegram:{chat_id}")
            await self.send_message(client, chat_id, f"🌤️ {response}")

        except TelegramServiceError as e:
            logger.error("Failed to answer Telegram message", chat_id=chat_id, error=str(e))

    async def poll_once(self, client: httpx.AsyncClient) -> List[asyncio.Task]:
        """Fetch pending updates and start a task for each of them."""
        updates = await self.get_updates(client)
        tasks = []

        for update in updates:
            self.offset = update["update_id"] + 1
            task = asyncio.create_task(self.handle_update(client, update))
            self._tasks.add(task)
            task.add_done_callback(self._on_task_done)
            tasks.append(task)

        return tasks

    def _on_task_done(self, task: asyncio.Task):
        self._tasks.discard(task)
        if task.cancelled():
            return

        error = task.exception()
        if error is not None:
            logger.error("Unexpected error while answering Telegram message", error=str(error), exc_info=error)

    async def start(self):
        """Poll Telegram until cancelled."""
        logger.info("🤖 Telegram bot started and ready to answer queries!")

        timeout = httpx.Timeout(self.poll_timeout + 10.0)
        async with httpx.AsyncClient(timeout=timeout) as client:
            try:
                while True:
                    try:
                        await self.poll_once(client)
                    except TelegramServiceError as e:
                        logger.warning("Polling Telegram failed", error=str(e), retry_in=self.retry_delay)
                        await asyncio.sleep(self.retry_delay)
            finally:
                pending = list(self._tasks)
                for task in pending:
                    task.cancel()
                # Let the handlers unwind before the client closes
                await asyncio.gather(*pending, return_exceptions=True)
                logger.info("Telegram bot stopped")
