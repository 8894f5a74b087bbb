"""
Boundary layer for external system integrations.

Thin clients for the job-control service (CodeBuild) and the CloudFormation
callback endpoint.
"""
