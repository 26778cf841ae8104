"""Tests for commitrefs.composer module."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from commitrefs.composer import (
    annotate_message_file,
    build_template,
    commit_with_references,
    insert_references,
    template_file,
)
from commitrefs.git import CommitTemplateError


class TestBuildTemplate:
    """Tests for build_template function."""

    def test_with_message(self):
        """Test template with a user message."""
        result = build_template(["JIRA Issue: ABC-9"], "Fix bug")
        assert result == "Fix bug\n\nrefs:\n\n* JIRA Issue: ABC-9\n"

    def test_without_message(self):
        """Test template without a message starts with refs."""
        result = build_template(["JIRA Issue: ABC-9"])
        assert result == "refs:\n\n* JIRA Issue: ABC-9\n"

    def test_multiple_references_in_order(self):
        """Test each reference gets its own bullet line."""
        result = build_template(["A", "B", "A"], "msg")
        assert result.endswith("refs:\n\n* A\n* B\n* A\n")

    def test_deterministic(self):
        """Test identical inputs render identical text."""
        refs = ["JIRA Issue: ABC-9", "GitLab Merge Request: g/p!1"]
        assert build_template(refs, "Fix") == build_template(refs, "Fix")


class TestTemplateFile:
    """Tests for template_file context manager."""

    def test_writes_content(self):
        """Test file holds the content while in scope."""
        with template_file("refs:\n") as path:
            assert path.read_text(encoding="utf-8") == "refs:\n"

    def test_removed_after_exit(self):
        """Test file is removed on normal exit."""
        with template_file("x") as path:
            assert path.exists()
        assert not path.exists()

    def test_removed_on_exception(self):
        """Test file is removed when the body raises."""
        with pytest.raises(RuntimeError):
            with template_file("x") as path:
                raise RuntimeError("boom")
        assert not path.exists()

    def test_removed_on_interrupt(self):
        """Test file is removed on KeyboardInterrupt."""
        with pytest.raises(KeyboardInterrupt):
            with template_file("x") as path:
                raise KeyboardInterrupt()
        assert not path.exists()

    def test_unique_names(self):
        """Test each invocation gets its own file."""
        with template_file("a") as first, template_file("b") as second:
            assert first != second

    def test_utf8(self):
        """Test non-ASCII content is written as UTF-8."""
        with template_file("Fix naïve café\n") as path:
            assert path.read_bytes() == "Fix naïve café\n".encode("utf-8")

    def test_creation_failure(self, mocker):
        """Test creation failure raises CommitTemplateError."""
        mocker.patch("tempfile.mkstemp", side_effect=OSError("disk full"))

        with pytest.raises(CommitTemplateError) as exc_info:
            with template_file("x"):
                pass

        assert "disk full" in str(exc_info.value)


class TestCommitWithReferences:
    """Tests for commit_with_references function."""

    def _capture_template(self, mocker, returncode=0):
        """Patch subprocess.run and record the template while git runs."""
        captured = {}

        def fake_run(cmd, check=False):
            captured["cmd"] = cmd
            for flag in ("-F", "-t"):
                if flag in cmd:
                    path = Path(cmd[cmd.index(flag) + 1])
                    captured["path"] = path
                    captured["content"] = path.read_text(encoding="utf-8")
            result = MagicMock()
            result.returncode = returncode
            return result

        mocker.patch("subprocess.run", side_effect=fake_run)
        return captured

    def test_file_mode_with_message(self, mocker):
        """Test references and message commit from file."""
        captured = self._capture_template(mocker)

        code = commit_with_references(["JIRA Issue: ABC-9"], "Fix bug", [])

        assert code == 0
        assert captured["cmd"][:3] == ["git", "commit", "-F"]
        assert captured["content"] == "Fix bug\n\nrefs:\n\n* JIRA Issue: ABC-9\n"
        assert not captured["path"].exists()

    def test_template_mode_without_message(self, mocker):
        """Test references without a message open the editor with a template."""
        captured = self._capture_template(mocker)

        commit_with_references(["JIRA Issue: ABC-9"], None, ["-a"])

        assert captured["cmd"][:3] == ["git", "commit", "-t"]
        assert captured["cmd"][-1] == "-a"
        assert captured["content"] == "refs:\n\n* JIRA Issue: ABC-9\n"
        assert not captured["path"].exists()

    def test_no_references_with_message(self, mocker):
        """Test direct -m commit when nothing was found."""
        captured = self._capture_template(mocker)
        mock_mkstemp = mocker.patch("tempfile.mkstemp")

        commit_with_references([], "Quick fix", [])

        assert captured["cmd"] == ["git", "commit", "-m", "Quick fix"]
        mock_mkstemp.assert_not_called()

    def test_no_references_no_message(self, mocker):
        """Test fully interactive commit."""
        captured = self._capture_template(mocker)

        commit_with_references([], None, ["--amend"])

        assert captured["cmd"] == ["git", "commit", "--amend"]

    def test_propagates_exit_code(self, mocker):
        """Test git's exit code is returned unchanged."""
        self._capture_template(mocker, returncode=3)

        assert commit_with_references(["JIRA Issue: ABC-9"], "Fix", []) == 3

    def test_removes_template_when_git_fails(self, mocker):
        """Test the template is removed if running git raises."""
        seen = {}

        def fake_run(cmd, check=False):
            seen["path"] = Path(cmd[cmd.index("-F") + 1])
            raise KeyboardInterrupt()

        mocker.patch("subprocess.run", side_effect=fake_run)

        with pytest.raises(KeyboardInterrupt):
            commit_with_references(["JIRA Issue: ABC-9"], "Fix", [])

        assert not seen["path"].exists()

    def test_template_failure_skips_git(self, mocker):
        """Test git is not run when the template cannot be created."""
        mocker.patch("tempfile.mkstemp", side_effect=OSError("read-only"))
        mock_run = mocker.patch("subprocess.run")

        with pytest.raises(CommitTemplateError):
            commit_with_references(["JIRA Issue: ABC-9"], "Fix", [])

        mock_run.assert_not_called()


class TestInsertReferences:
    """Tests for insert_references function."""

    def test_before_comments(self):
        """Test block is inserted before git's comment section."""
        text = "\n# Please enter the commit message\n# Lines starting with '#'\n"
        result = insert_references(text, ["JIRA Issue: ABC-9"])
        assert result == (
            "refs:\n\n* JIRA Issue: ABC-9\n"
            "\n# Please enter the commit message\n# Lines starting with '#'\n"
        )

    def test_after_existing_message(self):
        """Test existing message stays on top."""
        result = insert_references("Fix bug\n", ["JIRA Issue: ABC-9"])
        assert result == "Fix bug\n\nrefs:\n\n* JIRA Issue: ABC-9\n"

    def test_no_references(self):
        """Test text is unchanged without references."""
        assert insert_references("Fix bug\n", []) == "Fix bug\n"

    def test_existing_refs_block(self):
        """Test text already carrying refs is left alone."""
        text = "Fix bug\n\nrefs:\n\n* JIRA Issue: ABC-9\n"
        assert insert_references(text, ["JIRA Issue: ABC-9"]) == text

    def test_hash_subject_without_comment_split(self):
        """Test a -m message starting with # stays the subject."""
        result = insert_references("#42 fix login\n", ["JIRA Issue: ABC-9"], split_comments=False)
        assert result == "#42 fix login\n\nrefs:\n\n* JIRA Issue: ABC-9\n"

    def test_hash_line_followed_by_text(self):
        """Test a # line with message text after it is not a comment."""
        text = "#42 fix login\n\nHandle empty password\n"
        result = insert_references(text, ["JIRA Issue: ABC-9"])
        assert result == (
            "#42 fix login\n\nHandle empty password\n\nrefs:\n\n* JIRA Issue: ABC-9\n"
        )

    def test_trailing_comments_after_message(self):
        """Test only the trailing # run is treated as comments."""
        text = "Fix bug\n\n# Please enter the commit message\n#\n# On branch ABC-9\n"
        result = insert_references(text, ["JIRA Issue: ABC-9"])
        assert result == (
            "Fix bug\n\nrefs:\n\n* JIRA Issue: ABC-9\n"
            "\n# Please enter the commit message\n#\n# On branch ABC-9\n"
        )

    def test_scissors_section(self):
        """Test verbose diff below the scissors line stays below the refs."""
        text = (
            "Fix bug\n\n"
            "# ------------------------ >8 ------------------------\n"
            "# Do not modify or remove the line above.\n"
            "diff --git a/x.py b/x.py\n"
        )
        result = insert_references(text, ["JIRA Issue: ABC-9"])
        assert result.startswith("Fix bug\n\nrefs:\n\n* JIRA Issue: ABC-9\n\n# ----")
        assert result.endswith("diff --git a/x.py b/x.py\n")


class TestAnnotateMessageFile:
    """Tests for annotate_message_file function."""

    def test_updates_file(self, temp_dir):
        """Test file is rewritten with references."""
        msg_file = temp_dir / "COMMIT_EDITMSG"
        msg_file.write_text("Fix bug\n")

        assert annotate_message_file(msg_file, ["JIRA Issue: ABC-9"]) is True
        assert msg_file.read_text() == "Fix bug\n\nrefs:\n\n* JIRA Issue: ABC-9\n"

    def test_unchanged_file(self, temp_dir):
        """Test file without references is not rewritten."""
        msg_file = temp_dir / "COMMIT_EDITMSG"
        msg_file.write_text("Fix bug\n")

        assert annotate_message_file(msg_file, []) is False
        assert msg_file.read_text() == "Fix bug\n"
