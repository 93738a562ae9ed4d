import asyncio
from typing import Callable

import structlog

logger = structlog.get_logger(__name__)

GREETING = "👋 Weather assistant welcomes you!"
EXAMPLE_HINT = "Ask about the weather in any city, for example: \"What's the weather in London?\""
EXIT_HINT = "To exit type 'exit'"
GOODBYE = "Goodbye! Have a great day!"
PROMPT = "Your question: "


class ConsoleService:
    """Interactive text prompt in front of the weather agent."""

    def __init__(
            self,
            agent,
            input_func: Callable[[str], str] = input,
            output_func: Callable[..., None] = print,
    ):
        self.agent = agent
        self._input = input_func
        self._output = output_func

    async def handle_query(self, query: str) -> str:
        self._output("⌛ Getting weather information...")
        result = await self.agent.process_query(query, origin="console")
        self._output(f"\n🌤️ {result}\n")
        return result

    @staticmethod
    def _cancel_pending(loop: asyncio.AbstractEventLoop):
        pending = [task for task in asyncio.all_tasks(loop) if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))

    def start(self):
        """
        Run the conversation loop until the user types `exit`, closes stdin
        or presses Ctrl-C.

        input() runs on the main thread so Ctrl-C interrupts it; each query
        is driven to completion on one event loop.
        """
        logger.info("Console mode started")
        self._output(GREETING)
        self._output(EXAMPLE_HINT)
        self._output(EXIT_HINT)

        loop = asyncio.new_event_loop()
        try:
            while True:
                try:
                    query = self._input(PROMPT).strip()
                except (EOFError, KeyboardInterrupt):
                    self._output(GOODBYE)
                    break

                if not query:
                    continue

                if query.lower() == "exit":
                    self._output(GOODBYE)
                    break

                try:
                    loop.run_until_complete(self.handle_query(query))
                except KeyboardInterrupt:
                    self._cancel_pending(loop)
                    self._output(GOODBYE)
                    break
        finally:
            loop.run_until_complete(loop.shutdown_asyncgens())
            loop.close()

        logger.info("Console mode stopped")
