import pytest


AI_TEXT = (
    "Artificial intelligence models process natural language text efficiently and accurately today. "
    "Modern language models learn patterns from very large collections of text. "
    "These models process natural language to answer questions and summarize documents. "
    "Researchers keep improving how efficiently artificial intelligence handles long text inputs. "
    "Natural language processing now powers search engines, assistants, and translation tools. "
    "Efficient models reduce costs while keeping the quality of generated text high."
)


def make_article(sentence_count: int) -> str:
    """Distinct, well-formed sentences numbered in reading order."""
    topics = ["solar panels", "wind turbines", "battery storage", "power grids", "energy markets"]
    sentences = []
    for i in range(sentence_count):
        topic = topics[i % len(topics)]
        sentences.append(
            f"Section {i} explains how {topic} change the renewable energy landscape for households."
        )
    return " ".join(sentences)


@pytest.fixture
def ai_text():
    return AI_TEXT


@pytest.fixture
def article():
    return make_article(12)


@pytest.fixture
def article_factory():
    return make_article
