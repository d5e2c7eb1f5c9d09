"""Tests for keeping preview actors in step with the module list."""
import pytest

from shelfconfigurator.model.module import Module
from shelfconfigurator.view.scene import SceneReconciler, build_module_meshes


class FakePlotter:
    """Records plotter calls instead of rendering."""

    def __init__(self) -> None:
        self.added: list[str] = []
        self.removed: list[str] = []
        self.texts: list[str] = []
        self.actors: dict[str, object] = {}

    def add_mesh(self, mesh, name: str, **kwargs) -> object:
        actor = object()
        self.added.append(name)
        self.actors[name] = actor
        return actor

    def remove_actor(self, name: str) -> None:
        self.removed.append(name)
        self.actors.pop(name, None)

    def add_text(self, text: str, name: str, **kwargs) -> None:
        self.texts.append(text)


@pytest.fixture
def plotter() -> FakePlotter:
    return FakePlotter()


class TestBuildModuleMeshes:
    def test_panel_sits_inside_the_frame(self) -> None:
        module = Module(width=2.0, height=1.0, depth=1.0, grid_x=1)
        meshes = build_module_meshes(module)
        assert list(meshes.panel.bounds) == pytest.approx([0.04, 1.96, 0.04, 0.96, -0.46, 0.46])
        assert meshes.frame.n_points > 0

    def test_tiny_module_keeps_a_panel(self) -> None:
        module = Module(width=0.1, height=0.1, depth=0.1)
        x_min, x_max = list(build_module_meshes(module).panel.bounds)[:2]
        assert x_max > x_min


class TestSceneReconciler:
    def test_unchanged_modules_are_not_rebuilt(self, plotter) -> None:
        modules = [Module(id="a"), Module(id="b", grid_x=1)]
        reconciler = SceneReconciler(plotter)

        reconciler.reconcile(modules, selected_id="a")
        reconciler.reconcile(modules, selected_id="a")

        assert sorted(plotter.added) == ["frame-a", "frame-b", "module-a", "module-b"]
        assert reconciler.module_ids == {"a", "b"}
        assert plotter.texts[-1] == "W 500 mm × H 250 mm × D 250 mm"

    def test_removed_module_drops_its_actors(self, plotter) -> None:
        reconciler = SceneReconciler(plotter)
        reconciler.reconcile([Module(id="a"), Module(id="b", grid_x=1)])

        reconciler.reconcile([Module(id="a")])

        assert {"module-b", "frame-b"} <= set(plotter.removed)
        assert "module-a" not in plotter.removed
        assert reconciler.module_ids == {"a"}

    def test_selection_change_rebuilds_affected_modules_only(self, plotter) -> None:
        modules = [Module(id="a"), Module(id="b", grid_x=1), Module(id="c", grid_x=2)]
        reconciler = SceneReconciler(plotter)
        reconciler.reconcile(modules, selected_id="a")
        plotter.added.clear()

        reconciler.reconcile(modules, selected_id="b")

        assert sorted(plotter.added) == ["frame-a", "frame-b", "module-a", "module-b"]

    def test_picked_actor_maps_back_to_module(self, plotter) -> None:
        reconciler = SceneReconciler(plotter)
        reconciler.reconcile([Module(id="a")])
        assert reconciler.module_id_for_actor(plotter.actors["module-a"]) == "a"
        assert reconciler.module_id_for_actor(plotter.actors["frame-a"]) == "a"
        assert reconciler.module_id_for_actor(object()) is None

    def test_empty_configuration_clears_label(self, plotter) -> None:
        reconciler = SceneReconciler(plotter)
        reconciler.reconcile([Module(id="a")])
        reconciler.reconcile([])
        assert "dimensions" in plotter.removed
        assert reconciler.module_ids == set()

    def test_widening_one_module_respaces_all(self, plotter) -> None:
        """The cell pitch follows the widest module, so every actor moves with it."""
        modules = [Module(id="a"), Module(id="b", grid_x=1)]
        reconciler = SceneReconciler(plotter)
        reconciler.reconcile(modules)
        plotter.added.clear()

        modules[0].width = 2.0
        reconciler.reconcile(modules)

        assert sorted(plotter.added) == ["frame-a", "frame-b", "module-a", "module-b"]
        # Two 2.0-pitch cells: -1.0 .. 2.5
        assert plotter.texts[-1] == "W 875 mm × H 250 mm × D 250 mm"
