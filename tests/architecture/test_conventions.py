"""
Convention Enforcement Tests.

Permanent tests that catch anti-patterns which import-based layer rules
cannot detect: frozen dataclass conventions, immutable collections,
silent exception swallowing, and interface contracts.
"""

import ast
import inspect
from pathlib import Path

SRC_ROOT = Path(__file__).parent.parent.parent / "src" / "checkgate"

DOMAIN_MODEL_FILES = ("models.py", "barrier_event.py")


def _dataclass_info(source: str) -> list[tuple[ast.ClassDef, bool]]:
    """Return (class_node, is_frozen) for each @dataclass in source."""
    tree = ast.parse(source)
    results = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.ClassDef):
            continue
        for decorator in node.decorator_list:
            is_dataclass = False
            is_frozen = False

            if isinstance(decorator, ast.Name) and decorator.id == "dataclass":
                is_dataclass = True
            elif isinstance(decorator, ast.Call):
                func = decorator.func
                if isinstance(func, ast.Name) and func.id == "dataclass":
                    is_dataclass = True
                    for kw in decorator.keywords:
                        if kw.arg == "frozen" and isinstance(kw.value, ast.Constant):
                            is_frozen = kw.value.value

            if is_dataclass:
                results.append((node, is_frozen))
    return results


class TestFrozenDataclassConvention:
    """All domain dataclasses must be frozen."""

    def test_domain_models_are_frozen(self):
        violations = []

        for filename in DOMAIN_MODEL_FILES:
            source = (SRC_ROOT / "domain" / filename).read_text()
            for node, is_frozen in _dataclass_info(source):
                if not is_frozen:
                    violations.append(f"{filename}:{node.name}")

        assert not violations, (
            f"Domain dataclasses must be frozen. Violations: {violations}"
        )


class TestImmutableCollections:
    """Frozen domain model fields should use tuple, not list."""

    def test_domain_models_use_tuples_not_lists(self):
        violations = []

        for filename in DOMAIN_MODEL_FILES:
            source = (SRC_ROOT / "domain" / filename).read_text()
            for node, is_frozen in _dataclass_info(source):
                if not is_frozen:
                    continue
                for item in node.body:
                    if not isinstance(item, ast.AnnAssign):
                        continue
                    annotation = ast.get_source_segment(source, item.annotation) or ""
                    if "list[" in annotation.lower() or "dict[" in annotation.lower():
                        target_name = getattr(item.target, "id", "?")
                        violations.append(f"{node.name}.{target_name}: {annotation}")

        assert not violations, (
            "Frozen dataclass fields should use tuple, not list or dict:\n"
            + "\n".join(f"  - {v}" for v in violations)
        )


class TestNoSilentExceptionSwallowing:
    """No bare 'except: pass' or 'except Exception: pass' in src/."""

    def test_no_bare_except_pass(self):
        violations = []

        for py_file in SRC_ROOT.rglob("*.py"):
            source = py_file.read_text()
            tree = ast.parse(source)

            for node in ast.walk(tree):
                if not isinstance(node, ast.ExceptHandler):
                    continue
                if node.type is None:
                    violations.append(
                        f"{py_file.relative_to(SRC_ROOT)}:{node.lineno}: bare except"
                    )
                    continue
                if len(node.body) == 1:
                    stmt = node.body[0]
                    is_pass = isinstance(stmt, ast.Pass)
                    is_ellipsis = (
                        isinstance(stmt, ast.Expr)
                        and isinstance(stmt.value, ast.Constant)
                        and stmt.value.value is ...
                    )
                    if is_pass or is_ellipsis:
                        handler_type = ast.get_source_segment(source, node.type) or ""
                        violations.append(
                            f"{py_file.relative_to(SRC_ROOT)}:{node.lineno}: "
                            f"except {handler_type}: pass"
                        )

        assert not violations, "Silent exception swallowing found:\n" + "\n".join(
            f"  - {v}" for v in violations
        )


class TestInterfaceConventions:
    """Interface naming and contract conventions."""

    def test_all_ports_end_with_interface(self):
        """All ABCs in domain/interfaces.py must end with 'Interface'."""
        from checkgate.domain import interfaces

        abstract_classes = [
            name
            for name, obj in inspect.getmembers(interfaces, inspect.isclass)
            if inspect.isabstract(obj) and not name.startswith("_")
        ]

        violations = [
            name for name in abstract_classes if not name.endswith("Interface")
        ]

        assert abstract_classes
        assert not violations, (
            f"Abstract classes should end with 'Interface': {violations}"
        )

    def test_all_interface_methods_are_abstract(self):
        """Every public method on a port must be abstract."""
        from checkgate.domain import interfaces

        violations = []

        for name, cls in inspect.getmembers(interfaces, inspect.isclass):
            if not inspect.isabstract(cls) or not name.endswith("Interface"):
                continue

            for method_name, method in inspect.getmembers(
                cls, predicate=inspect.isfunction
            ):
                if method_name.startswith("_"):
                    continue
                if not getattr(method, "__isabstractmethod__", False):
                    violations.append(f"{name}.{method_name}")

        assert not violations, (
            f"Public interface methods must be abstract: {violations}"
        )

    def test_implementations_satisfy_interfaces(self):
        """Every adapter implements all abstract methods of its port."""
        from checkgate.domain.interfaces import (
            BarrierEventStoreInterface,
            ResourceLoaderInterface,
            SchedulerInterface,
            TimerHandleInterface,
        )
        from checkgate.infrastructure.loaders import (
            HttpResourceLoader,
            MockResourceLoader,
        )
        from checkgate.infrastructure.persistence import InMemoryBarrierEventStore
        from checkgate.infrastructure.scheduling import (
            AsyncioScheduler,
            ManualScheduler,
        )
        from checkgate.infrastructure.scheduling.asyncio_scheduler import (
            AsyncioTimerHandle,
        )
        from checkgate.infrastructure.scheduling.manual import ManualTimerHandle

        pairs = [
            (ResourceLoaderInterface, [HttpResourceLoader, MockResourceLoader]),
            (SchedulerInterface, [AsyncioScheduler, ManualScheduler]),
            (TimerHandleInterface, [AsyncioTimerHandle, ManualTimerHandle]),
            (BarrierEventStoreInterface, [InMemoryBarrierEventStore]),
        ]

        for port, implementations in pairs:
            for impl_cls in implementations:
                assert issubclass(impl_cls, port)
                assert not inspect.isabstract(impl_cls), (
                    f"{impl_cls.__name__} leaves abstract methods of {port.__name__}"
                )
