# Copyright 2020 Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"). You
# may not use this file except in compliance with the License. A copy of
# the License is located at
#
#     http://aws.amazon.com/apache2.0/
#
# or in the "license" file accompanying this file. This file is
# distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF
# ANY KIND, either express or implied. See the License for the specific
# language governing permissions and limitations under the License.
"""Errors raised by waitloop."""


class BaseError(Exception):
    """Abstract base for all errors raised by waitloop itself. All direct sub-classes
    should be kept/maintained in this file.

    Errors raised by a caller's condition are never wrapped in one of these; they
    propagate out of the wait loop unchanged.

    Args: see `Attributes` below.

    Attributes:
        message     (string): Description of why this exception was raised.
        caused_by   (exception): The underlying exception that caused this
            exception to be raised.
        failure_prefix (string): Prefix identifying the kind of failure.
    """

    def __init__(self, message: str, caused_by: Exception, failure_prefix: str = "Wait Error"):
        formatted_message = BaseError._format_exception_message(failure_prefix, message, caused_by)
        super(BaseError, self).__init__(formatted_message)
        self.message = formatted_message
        self.caused_by = caused_by
        self.failure_prefix = failure_prefix

    @staticmethod
    def _format_exception_message(failure_prefix: str, message: str, caused_by: Exception) -> str:
        """Generate the exception message."""
        cause_name = caused_by.__class__.__name__
        cause_message = str(caused_by)
        formatted_message = f"{failure_prefix}: (caused by {cause_name}): {message}: {cause_message}"
        # keep messages bounded, conditions may stringify to anything
        return formatted_message[:1024].strip()


class WaitError(BaseError):
    """Exception used to indicate that a wait did not reach its condition."""

    def __init__(self, message: str, caused_by: Exception):
        super(WaitError, self).__init__(message, caused_by, failure_prefix="Wait Error")


class InputError(BaseError):
    """Exception used to indicate that the caller's loop settings are invalid."""

    def __init__(self, message: str, caused_by: Exception) -> None:
        super(InputError, self).__init__(message, caused_by, failure_prefix="Input Error")
