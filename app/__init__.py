"""
FinTrack application-specific code.

This package contains the FinTrack API implementation:
- auth: Credential store, auth service and FastAPI dependencies
- models: User record
- middleware: Bearer-token gate and request context
- routers: HTTP endpoints
- schemas: Request/response bodies
- errors: Exception handlers producing the JSON envelope
- config: Application settings

Uses generic infrastructure from the common/ package.
"""
