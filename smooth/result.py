'''
outcome of one generation call

near the end of the integer width, running out of representable terms is normal
so truncation is a tag on the result instead of an exception
overflow before the second term means the basis itself does not fit, which is more severe
it is still returned as a tag, and expect() turns it into an exception for callers who want that
'''

import enum
from typing import Iterator, List


class SmoothInputError(Exception):
    def __init__(self, message: str):
        self.message = message

    def __str__(self) -> str:
        return 'invalid input: %s' % self.message


class SmoothOverflowError(Exception):
    def __init__(self, width: int, message: str):
        self.width = width
        self.message = message

    def __str__(self) -> str:
        return 'overflow at width %d: %s' % (self.width, self.message)


@enum.unique
class ResultTag(enum.Enum):
    COMPLETE = enum.auto()
    TRUNCATED = enum.auto()
    OVERFLOWED = enum.auto()


class SmoothResult:
    def __init__(self, tag: ResultTag, values: List[int], requested: int, width: int):
        self.tag = tag
        self.values = values
        self.requested = requested
        self.width = width

    @staticmethod
    def finish(values: List[int], requested: int, width: int) -> "SmoothResult":
        '''tag by comparing what we got with what was asked'''
        tag = ResultTag.COMPLETE if len(values) >= requested else ResultTag.TRUNCATED
        return SmoothResult(tag, values, requested, width)

    @staticmethod
    def overflowed(requested: int, width: int) -> "SmoothResult":
        return SmoothResult(ResultTag.OVERFLOWED, [], requested, width)

    def is_complete(self):
        return self.tag == ResultTag.COMPLETE

    def is_truncated(self):
        return self.tag == ResultTag.TRUNCATED

    def is_overflowed(self):
        return self.tag == ResultTag.OVERFLOWED

    def expect(self) -> List[int]:
        if self.tag == ResultTag.OVERFLOWED:
            raise SmoothOverflowError(self.width, 'basis does not fit, cannot produce term 2 of %d' % self.requested)
        return self.values

    def __len__(self):
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __str__(self) -> str:
        return '%s: %d of %d values' % (self.tag.name, len(self.values), self.requested)
