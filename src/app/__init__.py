"""
App layer: API 서버 (FastAPI).

역할:
- config: API 키 설정 (config.toml)
- content: 세션 산출물 조회
- scriptwriter: 외부 생성기 호출
- ⚠️ 파일시스템 안전 로직 없음 (core에 위임)
"""
