"""Shared fixtures for natural_content tests."""

from __future__ import annotations

import pytest

from natural_content.config import load_config


@pytest.fixture()
def stats_config():
    """Provide a mutable copy of the default statistics configuration."""

    return load_config(None)


@pytest.fixture()
def documents():
    return [
        "word1 word2 word3 word4 word5 word6. word7 word1 word8 word9 word10 word11 word6. "
        "word1 word12 word13. word1 word1 ",
        "word2 word7 word8 word9 word10 word7 word11 word7 word11 word11 word11 word11.",
        " word7 word2 ",
    ]


@pytest.fixture()
def documents_fr():
    return [
        "Les conditions d'utilisations de l'objet doivent se faire dans de bonnes conditions. "
        "Sinon l'objet ne peut pas bien être utilisé.",
        "Les conditions d'emploi de la chose doivent se faire dans de bonne condition. "
        "Sinon l'objet n'est pas utilisable.",
        "Pour éviter une mauvaise utilisation, les conditions d'utilisations doivent être faite correctement.",
    ]


@pytest.fixture()
def config_file(tmp_path):
    """Return a helper writing YAML text to a config file under tmp_path."""

    def write(text: str):
        path = tmp_path / "natural_content.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return write
