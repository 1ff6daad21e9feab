"""Root test configuration: isolate cwd and home so no real config file is picked up"""

import pytest


PELICAN_DOC = """\
Title: With Proper TDD, You Get That
Date: 2012-07-27 12:00
Author: lukas
Category: Allgemein, Test Driving
Tags: TDD, Testing
Slug: with-proper-tdd-you-get-that
Status: published

Dariusz Pasciak describes [how developing software without TDD is
like](http://blog.8thlight.com/dariusz-pasciak/2012/07/18/with-proper-tdd-you-get-that.html "With Proper TDD, You Get That")
and concludes:

End.
"""

JEKYLL_DOC = """\
---
author: "lukas"
categories:
- "Allgemein"
- "Test Driving"
date: "2012-07-27 12:00"
status: "published"
tags:
- "TDD"
- "Testing"
title: "With Proper TDD, You Get That"
---

Dariusz Pasciak describes [how developing software without TDD is
like](http://blog.8thlight.com/dariusz-pasciak/2012/07/18/with-proper-tdd-you-get-that.html "With Proper TDD, You Get That")
and concludes:

End.
"""


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory with a fake home and no BLOGTOOLS_* vars."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in ("NOTES_DIRECTORY", "NOTES_TEMPLATE", "VIDEO_EXTENSIONS", "MIN_SIZE", "FRONTMATTER_EXTENSION"):
        monkeypatch.delenv(f"BLOGTOOLS_{name}", raising=False)
    return tmp_path


@pytest.fixture(name="pelican_doc")
def pelican_doc_fixture():
    return PELICAN_DOC


@pytest.fixture(name="jekyll_doc")
def jekyll_doc_fixture():
    return JEKYLL_DOC
