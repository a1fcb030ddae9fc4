"""Word-matching intent router.

The first word of the input picks the intent (exit, load, question, reset,
save). For questions an optional "is"/"are" after the question word is kept
as the article and the rest is the entity. For load/save an optional
"from" / "as" / "to" is skipped and the rest is the filename.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import structlog

from knowledge import codec, responses
from knowledge.models import Category, KBStatus
from knowledge.store import KnowledgeStore
from knowledge.tokens import ends_with_suffix, tokens_equal

logger = structlog.get_logger()

KB_SUFFIX = ".ini"
ARTICLES = ("is", "are")
LOAD_FILLERS = ("from",)
SAVE_FILLERS = ("as", "to")
_TRAILING_PUNCTUATION = "?!."

AskFn = Callable[[str], str]


@dataclass
class Reply:
    text: str
    stop: bool = False


@dataclass
class BotContext:
    """Everything an intent handler may touch."""

    store: KnowledgeStore
    ask_fn: AskFn | None = None  # None = never learn, just report the gap
    max_input: int = 256
    max_entity: int = 256
    max_response: int = 256


def tokenize(line: str, max_input: int = 256) -> list[str]:
    """Split raw input into words, dropping closing punctuation."""
    line = line[:max_input].strip().rstrip(_TRAILING_PUNCTUATION)
    return line.split()


def _matches(word: str, *candidates: str) -> bool:
    return any(tokens_equal(word, c) for c in candidates)


def is_exit(word: str) -> bool:
    return _matches(word, "exit", "quit")


def is_load(word: str) -> bool:
    return _matches(word, "load")


def is_question(word: str) -> bool:
    return Category.resolve(word) is not None


def is_reset(word: str) -> bool:
    return _matches(word, "reset")


def is_save(word: str) -> bool:
    return _matches(word, "save")


def _filename(words: list[str], fillers: tuple[str, ...]) -> str:
    rest = words[1:]
    if rest and _matches(rest[0], *fillers):
        rest = rest[1:]
    return " ".join(rest)


def do_exit(words: list[str], ctx: BotContext) -> Reply:
    return Reply(responses.fit(responses.GOODBYE, ctx.max_response), stop=True)


def do_load(words: list[str], ctx: BotContext) -> Reply:
    cap = ctx.max_response
    filename = _filename(words, LOAD_FILLERS)
    if not filename:
        return Reply(responses.fit(responses.NEED_LOAD_FILE, cap))
    if not ends_with_suffix(filename, KB_SUFFIX):
        return Reply(responses.fit(responses.NOT_INI, cap))

    try:
        result = codec.load_file(ctx.store, Path(filename))
    except OSError as e:
        logger.info("load_failed", file=filename, error=str(e))
        return Reply(responses.fit(responses.FILE_NOT_FOUND, cap))

    if result.status == KBStatus.OUT_OF_MEMORY:
        return Reply(responses.fit(responses.NO_MEMORY_LOAD, cap))
    return Reply(responses.loaded(result.count, filename, cap))


def do_question(words: list[str], ctx: BotContext) -> Reply:
    cap = ctx.max_response
    intent = words[0]
    if len(words) == 1:
        return Reply(responses.incomplete_question(intent, cap))

    article = None
    rest = words[1:]
    if _matches(rest[0], *ARTICLES):
        if len(rest) == 1:
            return Reply(responses.fit(responses.MISSING_NOUN, cap))
        article, rest = rest[0], rest[1:]
    entity = " ".join(rest)[: ctx.max_entity]

    result = ctx.store.get(intent, entity, max_length=cap)
    if result.status != KBStatus.NOT_FOUND or ctx.ask_fn is None:
        return Reply(responses.for_get(result, intent, entity, article, cap))

    prompt = responses.not_found_prompt(intent, entity, article, cap)
    answer = ctx.ask_fn(prompt).strip()[:cap]
    if not answer:
        return Reply(responses.fit(responses.NOTHING_LEARNED, cap))

    status = ctx.store.put(intent, entity, answer)
    logger.info("fact_learned", category=intent.lower(), entity=entity, status=status.value)
    return Reply(responses.for_put(status, cap))


def do_reset(words: list[str], ctx: BotContext) -> Reply:
    ctx.store.reset()
    return Reply(responses.fit(responses.RESET, ctx.max_response))


def do_save(words: list[str], ctx: BotContext) -> Reply:
    cap = ctx.max_response
    filename = _filename(words, SAVE_FILLERS)
    if not filename:
        return Reply(responses.fit(responses.NEED_SAVE_FILE, cap))
    if not ends_with_suffix(filename, KB_SUFFIX):
        return Reply(responses.fit(responses.NOT_INI, cap))

    try:
        codec.save_file(ctx.store, Path(filename))
    except OSError as e:
        logger.warning("save_failed", file=filename, error=str(e))
        return Reply(responses.fit(responses.CANNOT_CREATE, cap))
    return Reply(responses.saved(filename, cap))


_ROUTES: list[tuple[Callable[[str], bool], Callable[[list[str], BotContext], Reply]]] = [
    (is_exit, do_exit),
    (is_load, do_load),
    (is_question, do_question),
    (is_reset, do_reset),
    (is_save, do_save),
]


def dispatch(words: list[str], ctx: BotContext) -> Reply:
    """Route tokenized input to the matching intent handler."""
    if not words:
        return Reply("")
    for matches, handler in _ROUTES:
        if matches(words[0]):
            return handler(words, ctx)
    return Reply(responses.not_understood(words[0], ctx.max_response))
