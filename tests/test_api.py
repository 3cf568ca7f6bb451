import logging
from pathlib import Path

import content_codegen
from content_codegen.codegen.registry import get_registry, register_emitter
from content_codegen.codegen.languages.java import JavaEmitter
from content_codegen.logging_config import PACKAGE_LOGGER, get_logger, setup_logging


def test_generate_sources(article_type, empty_type) -> None:
    seen = []

    specs = content_codegen.generate_sources(
        [article_type, empty_type],
        language="python",
        on_unsupported=lambda content_type, element: seen.append(element.codename),
    )

    assert [spec.name for spec in specs] == ["Article", "LandingPage"]
    assert [f.name for f in specs[0].fields] == ["title", "post_date"]
    assert seen == ["unknown_feature"]


def test_render_sources(article_type) -> None:
    sources = content_codegen.render_sources(
        [article_type], "java", {"package_name": "com.acme"}
    )

    assert list(sources) == ["Article"]
    assert sources["Article"].startswith("package com.acme;\n")
    assert sources["Article"].endswith("}\n")


def test_register_emitter_alias() -> None:
    register_emitter("kotlin", JavaEmitter, aliases=["kt"])
    try:
        assert content_codegen.codegen.is_language_supported("kt")
    finally:
        get_registry().unregister("kotlin")

    assert not content_codegen.codegen.is_language_supported("kt")


def test_get_logger_names() -> None:
    assert get_logger("provider").name == f"{PACKAGE_LOGGER}.provider"
    assert get_logger("content_codegen.cli").name == "content_codegen.cli"


def test_setup_logging_file(tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    logger = setup_logging(logging.INFO, log_file=log_file)
    try:
        get_logger("tests").info("hello %s", "log")
        get_logger("tests").debug("not written")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    text = log_file.read_text(encoding="utf-8")
    assert "INFO" in text
    assert "content_codegen.tests: hello log" in text
    assert "not written" not in text
