"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from commithook.config import HookConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, mocker):
    """Point ~/.commithook at a temporary directory for every test."""
    config_dir = tmp_path / ".commithook"
    mocker.patch("commithook.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture(autouse=True)
def clear_api_key_env(monkeypatch):
    """Keep a developer's real API key out of the tests."""
    monkeypatch.delenv("CLAUDE_API_KEY", raising=False)
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)


@pytest.fixture
def hook_config():
    """Config with an API key set."""
    return HookConfig(api_key="sk-ant-test-key-1234567890", timeout=5.0)


@pytest.fixture
def keyless_config():
    """Config without an API key."""
    return HookConfig()


@pytest.fixture
def feature_diff():
    """Three source files, 10 additions, 2 deletions, no doc or test paths."""
    return """diff --git a/src/app.py b/src/app.py
index 1234567..abcdefg 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,4 +1,7 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
diff --git a/src/models.py b/src/models.py
index 2345678..bcdefgh 100644
--- a/src/models.py
+++ b/src/models.py
@@ -10,3 +10,5 @@ class User:
     name: str
-    age: int
+    age: int = 0
+    email: str = ""
+    active: bool = True
diff --git a/src/utils.py b/src/utils.py
new file mode 100644
index 0000000..3456789
--- /dev/null
+++ b/src/utils.py
@@ -0,0 +1,3 @@
+import re
+def slugify(value):
+    return value.lower()
"""


@pytest.fixture
def readme_diff():
    """A change to README.md only."""
    return """diff --git a/README.md b/README.md
index e69de29..7f5a3d5 100644
--- a/README.md
+++ b/README.md
@@ -0,0 +1,3 @@
+# Project Title
+
+A brief description.
"""


@pytest.fixture
def unit_test_diff():
    """A change to a test module only."""
    return """diff --git a/tests/test_app.py b/tests/test_app.py
index 1111111..2222222 100644
--- a/tests/test_app.py
+++ b/tests/test_app.py
@@ -1,2 +1,3 @@
 def test_main():
     assert True
+    assert 1 == 1
"""


@pytest.fixture
def cleanup_diff():
    """A source change that removes more than it adds."""
    return """diff --git a/src/legacy.py b/src/legacy.py
index 1111111..2222222 100644
--- a/src/legacy.py
+++ b/src/legacy.py
@@ -1,6 +1,2 @@
-import os
-import sys
-
-def unused():
-    pass
+import os
 VALUE = 1
"""


@pytest.fixture
def quoted_docs_diff():
    """A new non-ASCII markdown file, as git prints it with core.quotePath on."""
    return r'''diff --git "a/docs/caf\303\251.md" "b/docs/caf\303\251.md"
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ "b/docs/caf\303\251.md"
@@ -0,0 +1,2 @@
+# Caf\303\251
+Menu notes.
'''
