"""Service layer — turns validated primitives into ServiceResult payloads."""
