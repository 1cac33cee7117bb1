"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Holds the car service and the outbound clients it composes (pricing and
maps). Services call repositories for DB operations; routers own commits.
"""
