"""
Service package: the interaction protocol engine.

- security:         Ed25519 request verification
- tokens:           (term, page, action) codec
- response_builder: page rendering
- router:           interaction state machine
- commands:         registered command surface
"""
