"""
AWS boundary modules.

Exports: CodeBuildClient
"""

from .codebuild_client import CodeBuildClient

__all__ = ["CodeBuildClient"]
