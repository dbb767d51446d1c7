import logging
import shlex
import subprocess
from typing import Dict, Any, List, Optional

from pydantic import BaseModel, Field

from .tool_base import Tool
from .config import Config

logger = logging.getLogger(__name__)

PARTIAL_FAILURE_MESSAGE = "tests executed but some failed"


class RunPwtInput(BaseModel):
    specFile: str = Field(description="The Playwright test file to run. It should be a .spec.ts file.")


class RunPwtTool(Tool):
    """
    Runs ``<runner> test <specFile>`` and reports one of three outcomes:

    - exit 0: ``{stdout, stderr, success: True}``
    - non-zero exit with output (tests ran, some failed):
      ``{stdout, stderr, success: False, message}``
    - the runner could not run at all:
      ``{error, stdout: "", stderr: "", success: False}``
    """

    input_model = RunPwtInput

    def __init__(self, command: Optional[str] = None, timeout: Optional[float] = None, working_dir: Optional[str] = None):
        """
        Args:
            command: Runner command line, e.g. "npx playwright"
            timeout: Seconds to wait for the runner; None waits indefinitely
            working_dir: Directory to run the command in (defaults to cwd)
        """
        self.command = command or Config.PWT_RUNNER_COMMAND
        self.timeout = timeout if timeout is not None else Config.PWT_RUNNER_TIMEOUT
        self.working_dir = working_dir

    @property
    def name(self) -> str:
        return "run_pwt"

    @property
    def description(self) -> str:
        return (
            "Run Playwright tests using the provided command. "
            "The command should be a valid Playwright test command."
        )

    def build_command(self, spec_file: str) -> List[str]:
        return shlex.split(self.command) + ["test", spec_file]

    def run(self, input: Dict[str, Any]) -> Dict[str, Any]:
        spec_file = input["specFile"]
        argv = self.build_command(spec_file)
        logger.info("Running Playwright tests: %s", spec_file)
        try:
            result = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                # Runner output is not guaranteed to be valid UTF-8
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
                cwd=self.working_dir,
            )
        except subprocess.TimeoutExpired:
            logger.error("Playwright command timed out after %s seconds", self.timeout)
            return {
                "error": f"Command '{' '.join(argv)}' timed out after {self.timeout} seconds",
                "stdout": "",
                "stderr": "",
                "success": False,
            }
        except Exception as e:
            logger.error("Error running Playwright command: %s", e)
            return {"error": str(e), "stdout": "", "stderr": "", "success": False}

        stdout = result.stdout or ""
        stderr = result.stderr or ""

        if result.returncode == 0:
            logger.info("Playwright tests finished running")
            logger.debug("Test Results:\n%s", stdout)
            return {"stdout": stdout, "stderr": stderr, "success": True}

        if stdout.strip():
            logger.info("Playwright tests finished running - some tests failed")
            logger.debug("Test Results:\n%s", stdout)
            return {
                "stdout": stdout,
                "stderr": stderr,
                "success": False,
                "message": PARTIAL_FAILURE_MESSAGE,
            }

        error_msg = stderr.strip() or f"Command failed with exit code {result.returncode}"
        logger.error("Error running Playwright command: %s", error_msg)
        return {"error": error_msg, "stdout": "", "stderr": "", "success": False}
