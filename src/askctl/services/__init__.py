"""Service layer: validation and the prompt loop, returning AnswerResult.

Services may import from the domain layer.
They must never import from commands or cli.
"""
