from hazelcore.layers import Layer, LayerStack


class Recorder(Layer):
    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def on_detach(self):
        self.log.append(self.name)


def test_default_layer_name():
    assert Layer().name == "Layer"


def test_layer_hooks_do_nothing_by_default():
    layer = Layer("base")
    layer.on_attach()
    layer.on_update(0.1)
    layer.on_event(object())
    assert layer.name == "base"


def test_layers_stay_below_overlays():
    stack = LayerStack()
    a, b, o1, o2 = (Layer(n) for n in ("a", "b", "o1", "o2"))
    stack.push_overlay(o1)
    stack.push_layer(a)
    stack.push_overlay(o2)
    stack.push_layer(b)
    assert list(stack) == [a, b, o1, o2]
    assert list(reversed(stack)) == [o2, o1, b, a]
    assert len(stack) == 4


def test_pop_layer_detaches_and_removes():
    log = []
    stack = LayerStack()
    a, b = Recorder("a", log), Recorder("b", log)
    stack.push_layer(a)
    stack.push_layer(b)
    stack.pop_layer(a)
    assert log == ["a"]
    assert list(stack) == [b]


def test_pop_layer_ignores_overlays():
    log = []
    stack = LayerStack()
    overlay = Recorder("o", log)
    stack.push_overlay(overlay)
    stack.pop_layer(overlay)
    assert log == []
    assert list(stack) == [overlay]


def test_pop_overlay_ignores_layers():
    log = []
    stack = LayerStack()
    layer = Recorder("l", log)
    stack.push_layer(layer)
    stack.pop_overlay(layer)
    assert log == []
    assert len(stack) == 1


def test_pop_overlay_then_push_layer_keeps_order():
    log = []
    stack = LayerStack()
    a, o = Recorder("a", log), Recorder("o", log)
    stack.push_layer(a)
    stack.push_overlay(o)
    stack.pop_overlay(o)
    b = Recorder("b", log)
    stack.push_layer(b)
    stack.push_overlay(o)
    assert log == ["o"]
    assert list(stack) == [a, b, o]


def test_insert_index_shrinks_after_pop_layer():
    stack = LayerStack()
    a, b, o = Layer("a"), Layer("b"), Layer("o")
    stack.push_layer(a)
    stack.push_overlay(o)
    stack.pop_layer(a)
    stack.push_layer(b)
    assert list(stack) == [b, o]


def test_clear_detaches_everything():
    log = []
    stack = LayerStack()
    stack.push_layer(Recorder("a", log))
    stack.push_overlay(Recorder("o", log))
    stack.clear()
    assert log == ["a", "o"]
    assert len(stack) == 0


def test_context_manager_clears_on_exit():
    log = []
    with LayerStack() as stack:
        stack.push_layer(Recorder("a", log))
    assert log == ["a"]
    assert len(stack) == 0