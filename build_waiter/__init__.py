"""
Build waiter package.

CloudFormation custom resource that starts a CodeBuild image-copy job,
waits for it to finish, and reports the outcome back to the stack.
"""
