"""가격 서비스 패키지 — 차량 ID별 가격 조회 마이크로서비스.

Pricing service package — Standalone microservice mapping a vehicle id to a
price. Runs as its own process with its own database:

    uvicorn app.pricing.main:app --port 8082
"""
