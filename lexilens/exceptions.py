# lexilens/exceptions.py
"""
프로젝트 전역에서 공통으로 사용하는 예외 정의 모듈.

- LexiconLoadError : 불용어/감성 사전 YAML 로딩 문제
- TextInputError   : 웹/입력 텍스트 검증 실패
"""

class LexiconLoadError(IOError):
    """불용어 / 긍정 / 부정 사전 파일 로딩 실패."""
    pass


class TextInputError(ValueError):
    """분석 요청 텍스트 검증 실패 (길이 초과 등)."""
    pass
