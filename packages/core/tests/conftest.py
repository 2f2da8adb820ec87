"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def fake_logger():
    """Logger stand-in for asserting on emitted diagnostics."""
    return MagicMock()


@pytest.fixture
def sample_diff():
    return """diff --git a/src/background.js b/src/background.js
index 1111111..2222222 100644
--- a/src/background.js
+++ b/src/background.js
@@ -1,4 +1,5 @@
 const a = 1;
-const b = 2;
+const b = 3;
+const c = 4;
 function go() {
   return a + b;
@@ -10,2 +11,2 @@ function go() {
 // tail
-old();
+fresh();
"""


@pytest.fixture
def linter_result():
    def message(uid, type_, file=None, line=None, **extra):
        data = {
            "uid": uid,
            "message": f"message {uid}",
            "type": type_,
            "file": file,
            "line": line,
            "column": None,
            "description": f"description {uid}",
            "id": [f"CODE_{uid}"],
            "context": [],
            "for_appversions": {},
            "tier": 1,
        }
        data.update(extra)
        return data

    return {
        "error": None,
        "validation": {
            "errors": 1,
            "warnings": 1,
            "notices": 1,
            "messages": [
                message("1", "error", file="manifest.json"),
                message("2", "warning", file="src/background.js", line=3),
                message("3", "notice", file="src/background.js", line=3),
                message("4", "notice", file="src/background.js", line=8),
                message("5", "warning", file=None),
            ],
        },
    }
