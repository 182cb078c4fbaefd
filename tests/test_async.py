"""
Tests for the asynchronous validation path and cancellation.
"""

import asyncio

import pytest

from rulekit.errors import ErrorCode, ValidationCancelledError, ValidatorConfigurationError
from rulekit.validation import (
    AsyncPredicateValidator,
    CancellationToken,
    NotEmptyValidator,
    PredicateValidator,
    RootContextData,
)


async def always_true(ctx, cancellation):
    return True


class TestAsyncParity:
    """The default async predicate behaves exactly like the sync one."""

    @pytest.mark.asyncio
    async def test_success_on_both_paths(self, make_context):
        validator = NotEmptyValidator()
        assert validator.validate(make_context("Alice")) == ()
        assert await validator.validate_async(make_context("Alice"), CancellationToken()) == ()

    @pytest.mark.asyncio
    async def test_failure_equivalent_on_both_paths(self, make_context):
        validator = NotEmptyValidator().with_error_code("REQ")
        root = RootContextData(collection_index=2)

        sync_failures = validator.validate(make_context("", root=root))
        async_failures = await validator.validate_async(make_context("", root=root))

        assert sync_failures == async_failures
        assert async_failures[0].error_message == "'Name' must not be empty."

    def test_default_async_predicate_does_not_suspend(self, make_context):
        # Driving the coroutine by hand: it must finish on the first send.
        coroutine = NotEmptyValidator().validate_async(make_context(""))
        with pytest.raises(StopIteration) as done:
            coroutine.send(None)
        assert len(done.value.value) == 1


class TestShouldValidateAsynchronously:

    def test_false_without_async_condition(self, make_context):
        assert NotEmptyValidator().should_validate_asynchronously(make_context("")) is False

    def test_true_with_async_condition_regardless_of_predicate(self, make_context):
        validator = NotEmptyValidator().when_async(always_true)
        assert validator.should_validate_asynchronously(make_context("")) is True
        assert validator.should_validate_asynchronously(make_context("Alice")) is True

    def test_async_predicate_validator_always_async(self, make_context):
        validator = AsyncPredicateValidator(lambda value, ctx, c: always_true(ctx, c))
        assert validator.should_validate_asynchronously(make_context("x")) is True


class TestAsyncPredicates:

    @pytest.mark.asyncio
    async def test_async_predicate_drives_async_path(self, make_context):
        async def taken(value, ctx, cancellation):
            await asyncio.sleep(0)
            return value not in {"admin", "root"}

        validator = PredicateValidator(lambda value, ctx: True, async_predicate=taken)

        assert validator.validate(make_context("admin")) == ()
        failures = await validator.validate_async(make_context("admin", "Username"))
        assert failures[0].error_message == "The specified condition was not met for 'Username'."

    @pytest.mark.asyncio
    async def test_cancellation_is_threaded_to_predicate(self, make_context):
        seen = []

        async def check(value, ctx, cancellation):
            seen.append(cancellation)
            cancellation.raise_if_cancelled("uniqueness check")
            return True

        token = CancellationToken()
        token.cancel()
        validator = AsyncPredicateValidator(check)

        with pytest.raises(ValidationCancelledError) as exc_info:
            await validator.validate_async(make_context("x"), token)

        assert seen == [token]
        assert exc_info.value.code is ErrorCode.E8000_CANCELLED
        assert exc_info.value.error.metadata["operation"] == "uniqueness check"

    @pytest.mark.asyncio
    async def test_uncancelled_token_passes_through(self, make_context):
        async def check(value, ctx, cancellation):
            cancellation.raise_if_cancelled()
            return value == "ok"

        validator = AsyncPredicateValidator(check)
        assert await validator.validate_async(make_context("ok"), CancellationToken()) == ()
        assert len(await validator.validate_async(make_context("bad"), CancellationToken())) == 1

    def test_async_predicate_validator_sync_path_without_loop(self, make_context):
        async def check(value, ctx, cancellation):
            return value == "ok"

        validator = AsyncPredicateValidator(check)
        assert validator.validate(make_context("ok")) == ()
        assert validator.validate(make_context("bad"))[0].error_code == "AsyncPredicateValidator"

    @pytest.mark.asyncio
    async def test_async_predicate_validator_sync_path_inside_loop(self, make_context):
        validator = AsyncPredicateValidator(lambda value, ctx, c: always_true(ctx, c))
        with pytest.raises(ValidatorConfigurationError) as exc_info:
            validator.validate(make_context("x"))
        assert exc_info.value.code is ErrorCode.E7004_SYNC_OVER_ASYNC


class TestAsyncConditions:

    @pytest.mark.asyncio
    async def test_conditions_are_combined(self, make_context):
        calls = []

        async def first(ctx, cancellation):
            calls.append("first")
            return True

        async def second(ctx, cancellation):
            calls.append("second")
            return False

        validator = NotEmptyValidator().when_async(first).when_async(second)
        result = await validator.options.async_condition(make_context(""), CancellationToken())

        assert result is False
        assert calls == ["first", "second"]

    def test_sync_conditions_are_combined(self, make_context):
        validator = NotEmptyValidator().when(lambda ctx: True).when(lambda ctx: ctx.property_value is not None)
        assert validator.options.condition(make_context("x")) is True
        assert validator.options.condition(make_context(None)) is False
        assert validator.should_validate_asynchronously(make_context(None)) is False


class TestCancellationToken:

    def test_initial_state(self):
        token = CancellationToken()
        assert token.cancelled is False
        token.raise_if_cancelled()

    def test_cancel_from_other_thread(self):
        import threading

        token = CancellationToken()
        thread = threading.Thread(target=token.cancel)
        thread.start()
        thread.join()
        assert token.cancelled is True
