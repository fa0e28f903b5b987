import pytest
from django.conf import settings


def pytest_configure():
    if settings.configured:
        return
    settings.configure(
        INSTALLED_APPS=["wiki"],
        CACHES={
            "default": {
                "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
                "LOCATION": "wiki-tests",
            }
        },
        PLANTUML={
            "ENABLE": False,
            "SERVER_URL": "",
        },
    )
    import django

    django.setup()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache

    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def identity_pandoc(monkeypatch):
    """Stand-in for pypandoc that leaves the text, HTML comments included, untouched."""
    calls = []

    def convert_text(source, to, format, extra_args=None, filters=None):
        calls.append(source)
        return source

    monkeypatch.setattr("pypandoc.convert_text", convert_text)
    return calls
