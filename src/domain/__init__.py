"""Domain layer - Pure business logic.

Structure:
- entities/: Assignor, Payable, User (mutable, have identity)
- value_objects/: PayableWithAssignor projection (immutable)
- protocols/: Repository and service interfaces (ports)
- errors/: Error value constants used in Result types
- types.py / validators/: Annotated field types with shared limits

The domain layer defines WHAT the business does, not HOW it's implemented.
"""
