from .code_review import CodeReviewCommand

__all__ = ["CodeReviewCommand"]
