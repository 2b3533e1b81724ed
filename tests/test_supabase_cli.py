"""
Supabase CLI 타입 생성 테스트
"""

import os
import subprocess
import sys
import unittest
from unittest.mock import Mock, patch

# 프로젝트 루트를 Python 경로에 추가
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from adapters.process import ProcessResult, ProcessRunner
from adapters.supabase_cli import CLI_INSTALL_MESSAGE, SupabaseCLI
from validation.arguments import TypeGenRequest
from validation.errors import CliNotFoundError, ExecutionError

CLI = ("npx", "supabase")


def result(args, returncode=0, stdout="", stderr=""):
    return ProcessResult(args=tuple(args), returncode=returncode, stdout=stdout, stderr=stderr)


class TestSupabaseCLI(unittest.TestCase):
    """타입 생성 명령 테스트"""

    def setUp(self):
        self.runner = Mock(spec=ProcessRunner)

    def version_ok_then(self, generation):
        """첫 호출(--version)은 성공, 두 번째 호출은 generation"""
        def run(args, timeout=None):
            if args[-1] == "--version":
                return result(args, stdout="1.200.3\n")
            if isinstance(generation, Exception):
                raise generation
            return generation
        self.runner.run.side_effect = run

    def test_hosted_project_command(self):
        """프로젝트 ref가 있으면 --project-id"""
        cli = SupabaseCLI(CLI, project_ref="abcdefgh", runner=self.runner)
        self.version_ok_then(result((), stdout="export type Json = string\n"))

        output = cli.generate_types(TypeGenRequest(schema="public"))

        self.assertEqual(output, "export type Json = string\n")
        generation_args = self.runner.run.call_args_list[1][0][0]
        self.assertEqual(generation_args, (
            "npx", "supabase", "gen", "types", "typescript",
            "--project-id", "abcdefgh", "--schema", "public",
        ))

    def test_local_command(self):
        """프로젝트 ref가 없으면 --local"""
        cli = SupabaseCLI(CLI, project_ref=None, runner=self.runner)
        args = cli.build_gen_types_args("storage")
        self.assertEqual(args, (
            "npx", "supabase", "gen", "types", "typescript", "--local", "--schema", "storage",
        ))
        self.assertNotIn("--project-id", args)

    def test_schema_passed_as_single_argument(self):
        """스키마 이름은 셸을 거치지 않고 인자 하나로 전달"""
        cli = SupabaseCLI(CLI, runner=self.runner)
        args = cli.build_gen_types_args("public; rm -rf /")
        self.assertEqual(args[-1], "public; rm -rf /")

    def test_cli_missing(self):
        """CLI가 없으면 설치 안내, 생성 명령은 실행하지 않음"""
        self.runner.run.side_effect = FileNotFoundError("npx")
        cli = SupabaseCLI(CLI, project_ref="abc", runner=self.runner)

        with self.assertRaises(CliNotFoundError) as context:
            cli.generate_types(TypeGenRequest())

        self.assertEqual(context.exception.message, CLI_INSTALL_MESSAGE)
        self.assertIn("npm install -g supabase", context.exception.message)
        self.assertEqual(self.runner.run.call_count, 1)
        self.assertEqual(self.runner.run.call_args[0][0], ("npx", "supabase", "--version"))

    def test_cli_version_check_nonzero_exit(self):
        self.runner.run.return_value = result(CLI + ("--version",), returncode=1, stderr="not found")
        cli = SupabaseCLI(CLI, runner=self.runner)
        self.assertFalse(cli.is_available())
        with self.assertRaises(CliNotFoundError):
            cli.generate_types(TypeGenRequest())
        self.assertEqual(self.runner.run.call_count, 2)

    def test_cli_version_check_timeout(self):
        self.runner.run.side_effect = subprocess.TimeoutExpired(cmd="npx", timeout=60)
        self.assertFalse(SupabaseCLI(CLI, runner=self.runner).is_available())

    def test_stderr_used_when_stdout_empty(self):
        cli = SupabaseCLI(CLI, runner=self.runner)
        self.version_ok_then(result((), stdout="", stderr="Connecting to local database...\n"))
        self.assertEqual(cli.generate_types(TypeGenRequest()), "Connecting to local database...\n")

    def test_no_output(self):
        cli = SupabaseCLI(CLI, runner=self.runner)
        self.version_ok_then(result(()))
        self.assertEqual(cli.generate_types(TypeGenRequest()), "No types generated")

    def test_nonzero_exit(self):
        """생성 실패 시 메시지 래핑"""
        cli = SupabaseCLI(CLI, project_ref="abc", runner=self.runner)
        self.version_ok_then(result((), returncode=1, stderr="Access token not provided."))

        with self.assertRaises(ExecutionError) as context:
            cli.generate_types(TypeGenRequest())

        self.assertTrue(context.exception.message.startswith("Failed to generate types: "))
        self.assertIn("Access token not provided.", context.exception.message)
        self.assertEqual(context.exception.details, {})

    def test_generation_timeout(self):
        cli = SupabaseCLI(CLI, runner=self.runner)
        self.version_ok_then(subprocess.TimeoutExpired(cmd="npx", timeout=120))

        with self.assertRaises(ExecutionError) as context:
            cli.generate_types(TypeGenRequest())
        self.assertIn("timed out after 120 seconds", context.exception.message)

    def test_generation_spawn_failure(self):
        cli = SupabaseCLI(CLI, runner=self.runner)
        self.version_ok_then(PermissionError("permission denied"))

        with self.assertRaises(ExecutionError) as context:
            cli.generate_types(TypeGenRequest())
        self.assertIn("permission denied", context.exception.message)


class TestProcessRunner(unittest.TestCase):
    """서브프로세스 실행기 테스트"""

    @patch("adapters.process.subprocess.run")
    def test_run_captures_output(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(
            args=["npx", "supabase", "--version"], returncode=0, stdout="1.0.0\n", stderr=""
        )
        runner = ProcessRunner(timeout=30)

        completed = runner.run(("npx", "supabase", "--version"))

        self.assertTrue(completed.ok)
        self.assertEqual(completed.stdout, "1.0.0\n")
        self.assertEqual(completed.args, ("npx", "supabase", "--version"))
        mock_run.assert_called_once_with(
            ["npx", "supabase", "--version"],
            capture_output=True, text=True, timeout=30, check=False,
        )

    @patch("adapters.process.subprocess.run")
    def test_timeout_override(self, mock_run):
        mock_run.return_value = subprocess.CompletedProcess(args=["x"], returncode=2, stdout=None, stderr=None)
        completed = ProcessRunner(timeout=None).run(["x"], timeout=5)

        self.assertFalse(completed.ok)
        self.assertEqual(completed.stdout, "")
        self.assertEqual(mock_run.call_args[1]["timeout"], 5)

    def test_real_process(self):
        """실제 프로세스 실행 (현재 인터프리터 사용)"""
        completed = ProcessRunner(timeout=30).run([sys.executable, "-c", "print('hello')"])
        self.assertEqual(completed.returncode, 0)
        self.assertEqual(completed.stdout.strip(), "hello")


if __name__ == '__main__':
    unittest.main(verbosity=2)
