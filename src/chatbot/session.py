"""Interactive read-respond loop around the intent router."""

import structlog

from knowledge.store import KnowledgeStore

from .intents import BotContext, Reply, dispatch, tokenize

logger = structlog.get_logger()


class ChatSession:
    """Runs a conversation against an injected knowledge store."""

    def __init__(
        self,
        store: KnowledgeStore,
        bot_name: str = "Chatbot",
        user_name: str = "User",
        max_input: int = 256,
        max_entity: int = 256,
        max_response: int = 256,
        input_fn=None,
        output_fn=None,
        learn: bool = True,
    ):
        self.store = store
        self.bot_name = bot_name
        self.user_name = user_name
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.context = BotContext(
            store=store,
            ask_fn=self._ask if learn else None,
            max_input=max_input,
            max_entity=max_entity,
            max_response=max_response,
        )

    @classmethod
    def from_config(cls, store: KnowledgeStore, config: dict, **kwargs) -> "ChatSession":
        bot = config.get("bot", {})
        limits = config.get("limits", {})
        return cls(
            store,
            bot_name=bot.get("bot_name", "Chatbot"),
            user_name=bot.get("user_name", "User"),
            max_input=limits.get("max_input", 256),
            max_entity=limits.get("max_entity", 256),
            max_response=limits.get("max_response", 256),
            **kwargs,
        )

    def _ask(self, prompt: str) -> str:
        """Ask the user for an answer the bot does not have."""
        self.output_fn(f"{self.bot_name}: {prompt}")
        try:
            return self.input_fn(f"{self.user_name}: ")
        except (EOFError, KeyboardInterrupt):
            return ""

    def respond(self, line: str) -> Reply:
        """Handle one line of user input."""
        words = tokenize(line, self.context.max_input)
        return dispatch(words, self.context)

    def run(self) -> int:
        """Loop until the user exits or input ends. Returns turns handled."""
        turns = 0
        while True:
            try:
                line = self.input_fn(f"{self.user_name}: ")
            except (EOFError, KeyboardInterrupt):
                logger.debug("session_input_closed", turns=turns)
                break

            reply = self.respond(line)
            turns += 1
            self.output_fn(f"{self.bot_name}: {reply.text}")
            if reply.stop:
                break
        return turns
