"""
Run the image-copy build from a workstation.

Usage:
    python -m build_waiter.scripts.run_build --project CopySkyfloAwsCrawlerImage-1
    python -m build_waiter.scripts.run_build --project NAME --region us-east-1 --interval 10

Purpose:
- Start the CodeBuild project outside CloudFormation
- Wait for the build with the same trigger and poller the Lambda uses
- Exit 0 on SUCCEEDED, 1 otherwise (no callback is sent)

Dependencies: boto3
System role: Operator helper for retrying a failed image copy
"""

import logging
import sys
from typing import Optional

from botocore.exceptions import BotoCoreError, ClientError

from build_waiter.boundary.aws import CodeBuildClient
from build_waiter.core.build_trigger import BuildTrigger
from build_waiter.core.exceptions import BuildWaiterError
from build_waiter.core.status_poller import DEFAULT_POLL_INTERVAL_SECONDS, StatusPoller

logger = logging.getLogger(__name__)

USAGE = "Usage: python -m build_waiter.scripts.run_build --project NAME [--region REGION] [--interval SECONDS]"


def _flag(argv: list[str], name: str) -> Optional[str]:
    """Return the value following a --flag, if present and not another flag."""
    if name in argv:
        idx = argv.index(name)
        if idx + 1 < len(argv) and not argv[idx + 1].startswith("--"):
            return argv[idx + 1]
    return None


def run(project: str, region: Optional[str] = None, interval: float = DEFAULT_POLL_INTERVAL_SECONDS) -> bool:
    """
    Start one build and wait for it.

    Args:
        project: CodeBuild project name
        region: AWS region (boto3 default chain if None)
        interval: Seconds between status queries

    Returns:
        bool: True if the build SUCCEEDED
    """
    codebuild = CodeBuildClient(region=region)
    handle = BuildTrigger(codebuild).start(project)
    logger.info(f"Waiting for build {handle.id}")

    status = StatusPoller(codebuild, interval_seconds=interval).await_terminal(handle)
    if status.is_success:
        logger.info(f"✓ Build {handle.id} succeeded")
        return True

    logger.error(f"Build {handle.id} did not succeed: {status.value}")
    return False


def main(argv: Optional[list[str]] = None) -> None:
    """CLI entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    argv = sys.argv[1:] if argv is None else argv

    project = _flag(argv, "--project")
    if not project:
        print(USAGE)
        sys.exit(1)

    interval_arg = _flag(argv, "--interval")
    try:
        interval = float(interval_arg) if interval_arg else DEFAULT_POLL_INTERVAL_SECONDS
    except ValueError:
        logger.error(f"Invalid --interval value: {interval_arg}")
        sys.exit(1)
    if interval <= 0:
        logger.error("--interval must be positive")
        sys.exit(1)

    try:
        success = run(project, region=_flag(argv, "--region"), interval=interval)
    except (BuildWaiterError, BotoCoreError, ClientError, ValueError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
