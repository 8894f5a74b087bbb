"""
CloudFormation custom resource that waits for the image-copy build.

Entry point: build_waiter.core.custom_resource.lambda_handler.handler
"""
