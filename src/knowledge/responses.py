"""User-facing replies. Every reply is bounded to the caller's capacity."""

from .models import GetResult, KBStatus

DEFAULT_CAPACITY = 256

THANKS = "Thank you for the response."
INVALID_GET = "Invalid Intent."
INVALID_PUT = "Unknown Question, please re-type."
NO_MEMORY = "Insufficient memory space. Please clear the knowledge in memory."
NO_MEMORY_LOAD = "There is insufficient memory space. Please clear the knowledge in memory."
NOTHING_LEARNED = "Okay, I still don't know."

GOODBYE = "Goodbye!"
RESET = "Chatbot reset."
MISSING_NOUN = "Missing Noun. Please re-enter the question."
NEED_LOAD_FILE = "There is no file for me to read. Please specify file to load. e.g. 'sample.ini'"
NEED_SAVE_FILE = (
    "There is no file for me to write to. Please specify file to save to. e.g. 'sample.ini'"
)
NOT_INI = "I cannot read the file. Please upload a .ini file. e.g. 'sample.ini'"
FILE_NOT_FOUND = "I cannot find the file. Please upload an existing .ini file."
CANNOT_CREATE = "I am unable to open/create file. Please try again."

QUESTION_EXAMPLES = {
    "what": "What is SIT?",
    "where": "Where is SIT?",
    "who": "Who is Frank Guan?",
}


def fit(text: str, capacity: int = DEFAULT_CAPACITY) -> str:
    """Clip ``text`` to at most ``capacity`` characters."""
    if capacity <= 0:
        return ""
    return text[:capacity]


def not_found_prompt(
    category: str, entity: str, article: str | None = None, capacity: int = DEFAULT_CAPACITY
) -> str:
    """Prompt used to ask the user for a missing answer."""
    words = [category, article, entity] if article else [category, entity]
    return fit(f"I don't know. {' '.join(words)}?", capacity)


def for_get(
    result: GetResult,
    category: str,
    entity: str,
    article: str | None = None,
    capacity: int = DEFAULT_CAPACITY,
) -> str:
    if result.status == KBStatus.FOUND:
        return fit(result.answer or "", capacity)
    if result.status == KBStatus.NOT_FOUND:
        return not_found_prompt(category, entity, article, capacity)
    return fit(INVALID_GET, capacity)


def for_put(status: KBStatus, capacity: int = DEFAULT_CAPACITY) -> str:
    if status in (KBStatus.INSERTED, KBStatus.UPDATED):
        return fit(THANKS, capacity)
    if status == KBStatus.INVALID_CATEGORY:
        return fit(INVALID_PUT, capacity)
    if status == KBStatus.OUT_OF_MEMORY:
        return fit(NO_MEMORY, capacity)
    raise ValueError(f"Not a put outcome: {status}")


def not_understood(word: str, capacity: int = DEFAULT_CAPACITY) -> str:
    return fit(f'I don\'t understand "{word}".', capacity)


def incomplete_question(word: str, capacity: int = DEFAULT_CAPACITY) -> str:
    example = QUESTION_EXAMPLES.get(word.lower(), "What is SIT?")
    return fit(
        f"I do not understand the phrase. Please enter a question. e.g. '{example}'", capacity
    )


def loaded(count: int, filename: str, capacity: int = DEFAULT_CAPACITY) -> str:
    return fit(f"I have read {count} responses from {filename}", capacity)


def saved(filename: str, capacity: int = DEFAULT_CAPACITY) -> str:
    return fit(f"My knowledge has been saved to {filename}", capacity)
