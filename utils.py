"""
Utility functions for lazy lists

Logging setup, runtime configuration, performance measurement and a small
declarative pipeline runner built on LazyOperation.
"""

import gc
import sys
import time
import logging
import tracemalloc
from typing import Any, Dict, Iterable, List, Optional, Union

from lazylist import LazyList
from models import LazyListSettings, LazyOperation, OperationType, get_settings, set_settings

logger = logging.getLogger(__name__)


def setup_logging(settings: Optional[LazyListSettings] = None) -> logging.Logger:
    """Setup structured logging for the lazy list modules"""
    settings = settings or get_settings()
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))
    logging.basicConfig(
        level=settings.log_level,
        format=settings.log_format,
        handlers=handlers,
        force=True
    )
    return logging.getLogger('lazylist')


def configure(**fields) -> LazyListSettings:
    """Validate and install new settings; unspecified fields keep their current value."""
    settings = LazyListSettings(**{**get_settings().model_dump(), **fields})
    set_settings(settings)
    setup_logging(settings)
    logger.debug(f"Settings applied: {settings.model_dump()}")
    return settings


# Every measurement taken by measure_performance, oldest first
_measurements: List[Dict[str, Any]] = []


def _record(performance_info: Dict[str, Any]) -> None:
    # the result itself is not kept: it may be an unbounded LazyList
    entry = {key: value for key, value in performance_info.items() if key != "result"}
    _measurements.append(entry)


def _result_size(result) -> Optional[int]:
    # len() of a LazyList would force it, so only count what is realized
    if isinstance(result, LazyList):
        return result.realized_length
    return len(result) if hasattr(result, "__len__") else None


def measure_performance(operation_name: str, func, *args, **kwargs) -> Dict[str, Any]:
    """Measure performance of a function call with memory tracking"""
    tracemalloc.start()
    gc.collect()
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()

        performance_info = {
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak / 1024 / 1024,
            "success": True,
            "result": result,
            "result_size": _result_size(result),
            "timestamp": time.time()
        }
        _record(performance_info)
        return performance_info

    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        _, peak = tracemalloc.get_traced_memory()

        _record({
            "operation": operation_name,
            "execution_time_ms": execution_time_ms,
            "memory_usage_mb": peak / 1024 / 1024,
            "success": False,
            "error": str(e),
            "timestamp": time.time()
        })
        logger.error(f"Operation {operation_name} failed: {e}")
        raise

    finally:
        tracemalloc.stop()


def get_performance_summary() -> Dict[str, Any]:
    """
    Totals over every recorded measurement, with calls and failures broken
    down per operation name.
    """
    by_operation: Dict[str, Dict[str, int]] = {}
    for entry in _measurements:
        counts = by_operation.setdefault(entry["operation"], {"calls": 0, "failures": 0})
        counts["calls"] += 1
        if not entry["success"]:
            counts["failures"] += 1

    count = len(_measurements)
    total_time_ms = sum(entry["execution_time_ms"] for entry in _measurements)
    peak_memory_mb = max((entry["memory_usage_mb"] for entry in _measurements), default=0.0)
    return {
        "total_operations": count,
        "failed_operations": sum(counts["failures"] for counts in by_operation.values()),
        "total_time_ms": total_time_ms,
        "avg_time_ms": total_time_ms / count if count else 0.0,
        "peak_memory_mb": peak_memory_mb,
        "by_operation": by_operation,
    }


def clear_performance_metrics() -> None:
    _measurements.clear()


def realization_report(seq: LazyList) -> Dict[str, Any]:
    """How much of a LazyList has been generated, without generating more."""
    return {
        "realized_length": seq.realized_length,
        "sealed": seq.is_sealed,
        "preview": repr(seq)
    }


def validate_lazy_evaluation(seq: LazyList) -> bool:
    """True while nothing of seq has been generated yet."""
    return isinstance(seq, LazyList) and seq.realized_length == 0 and not seq.is_sealed


def apply_operation(seq: LazyList, operation: LazyOperation) -> LazyList:
    """Apply one validated pipeline step."""
    op_type = operation.type

    if op_type == OperationType.MAP:
        return seq.map(operation.function)
    if op_type == OperationType.FILTER:
        return seq.filter(operation.function)
    if op_type == OperationType.TAKE:
        return seq.take(operation.count)
    if op_type == OperationType.DROP:
        return seq.drop(operation.count)
    if op_type == OperationType.TAKE_WHILE:
        return seq.take_while(operation.function)
    if op_type == OperationType.DROP_WHILE:
        return seq.drop_while(operation.function)
    if op_type == OperationType.NUB:
        return seq.nub()
    if op_type == OperationType.SCANL1:
        return seq.scanl1(operation.function)
    raise ValueError(f"Unknown operation type: {op_type}")


def process_lazy_operations(source: Union[LazyList, Iterable[Any]],
                            operations: List[Union[LazyOperation, Dict[str, Any]]],
                            limit: Optional[int] = None) -> Dict[str, Any]:
    """
    Process a sequence of lazy operations

    source may be infinite as long as limit (or a take step) bounds the
    result. Failures, including invalid operation descriptions, are reported
    in an "error" entry instead of being raised.
    """
    start_time = time.perf_counter()
    operations_applied = []

    try:
        seq = source if isinstance(source, LazyList) else LazyList.view(source)

        for op in operations:
            operation = op if isinstance(op, LazyOperation) else LazyOperation.model_validate(op)
            seq = apply_operation(seq, operation)
            operations_applied.append(operation.type.value)

        if limit is not None:
            seq = seq.take(limit)

        tracemalloc.start()
        gc.collect()
        try:
            result = seq.to_list()
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        processing_time_ms = (time.perf_counter() - start_time) * 1000

        return {
            "result": result,
            "operations_applied": operations_applied,
            "performance": {
                "processing_time_ms": processing_time_ms,
                "memory_usage_mb": peak / 1024 / 1024,
                "output_size": len(result),
                "lazy_evaluation": True,
                "operation": "lazy_chain"
            }
        }

    except Exception as e:
        processing_time_ms = (time.perf_counter() - start_time) * 1000
        logger.error(f"Lazy pipeline failed after {operations_applied}: {e}")

        return {
            "error": str(e),
            "operations_applied": operations_applied,
            "performance": {
                "processing_time_ms": processing_time_ms,
                "error": True
            }
        }
