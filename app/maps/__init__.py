"""지도 서비스 패키지 — 좌표를 주소로 변환하는 모의 지오코딩 서비스.

Maps service package — Mock geocoding microservice that returns a street
address for any coordinate pair:

    uvicorn app.maps.main:app --port 9191
"""
