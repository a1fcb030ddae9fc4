"""Tests for ChatSession — interactive loop with injected input/output."""

from chatbot.session import ChatSession


def _scripted(lines):
    """input_fn that replays ``lines`` then raises EOFError."""
    it = iter(lines)
    prompts = []

    def input_fn(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    input_fn.prompts = prompts
    return input_fn


class TestRun:
    def test_exit_stops_loop(self, store):
        out = []
        session = ChatSession(store, input_fn=_scripted(["exit", "what is SIT"]), output_fn=out.append)
        turns = session.run()
        assert turns == 1
        assert out == ["Chatbot: Goodbye!"]

    def test_eof_ends_loop(self, store):
        out = []
        session = ChatSession(store, input_fn=_scripted([]), output_fn=out.append)
        assert session.run() == 0
        assert out == []

    def test_keyboard_interrupt_ends_loop(self, store):
        def interrupt(prompt):
            raise KeyboardInterrupt

        session = ChatSession(store, input_fn=interrupt, output_fn=lambda s: None)
        assert session.run() == 0

    def test_learning_conversation(self, store):
        out = []
        input_fn = _scripted([
            "What is SIT?",
            "Singapore Institute of Technology",
            "what is sit",
            "quit",
        ])
        session = ChatSession(store, input_fn=input_fn, output_fn=out.append)
        session.run()

        assert out == [
            "Chatbot: I don't know. What is SIT?",
            "Chatbot: Thank you for the response.",
            "Chatbot: Singapore Institute of Technology",
            "Chatbot: Goodbye!",
        ]
        assert input_fn.prompts == ["User: "] * 4

    def test_eof_during_learning(self, store):
        out = []
        session = ChatSession(store, input_fn=_scripted(["Who is Frank Guan?"]), output_fn=out.append)
        session.run()
        assert out[-1] == "Chatbot: Okay, I still don't know."
        assert len(store) == 0

    def test_interrupt_during_learning(self, store):
        out = []
        lines = iter(["What is SIT?"])

        def input_fn(prompt):
            try:
                return next(lines)
            except StopIteration:
                raise KeyboardInterrupt

        session = ChatSession(store, input_fn=input_fn, output_fn=out.append)
        assert session.run() == 1
        assert out[-1] == "Chatbot: Okay, I still don't know."
        assert len(store) == 0

    def test_custom_names(self, populated_store):
        out = []
        input_fn = _scripted(["where is SIT", "exit"])
        session = ChatSession(
            populated_store, bot_name="Bot", user_name="Me", input_fn=input_fn, output_fn=out.append
        )
        session.run()
        assert out[0] == "Bot: Dover"
        assert input_fn.prompts[0] == "Me: "


class TestRespond:
    def test_respond_without_learning(self, store):
        session = ChatSession(store, learn=False)
        reply = session.respond("Where is SIT?")
        assert reply.text == "I don't know. Where is SIT?"
        assert len(store) == 0

    def test_from_config(self, populated_store):
        config = {
            "bot": {"bot_name": "Oracle", "user_name": "Student"},
            "limits": {"max_input": 256, "max_entity": 256, "max_response": 5},
        }
        session = ChatSession.from_config(populated_store, config, learn=False)
        assert session.bot_name == "Oracle"
        assert session.respond("hello").text == "I don"

    def test_from_empty_config_uses_defaults(self, store):
        session = ChatSession.from_config(store, {})
        assert session.bot_name == "Chatbot"
        assert session.context.max_response == 256
