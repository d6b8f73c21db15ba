"""Tests for playdeck.core.validator: diagnostics, wording and ordering."""

from playdeck.core.project import Project
from playdeck.core.slides import Layer, Slide
from playdeck.core.validator import is_playable, validate

from project_builders import (
    button,
    goto,
    hide,
    layer,
    number_var,
    on_click,
    project,
    set_var,
    show,
    slide,
    text,
)


def _clean_project():
    return project(
        slide("s1",
              layer("l1", button("b1", on_click("t1", set_var("score", 5), goto("s2")))),
              layer("l2", text("x1"), visible=False)),
        slide("s2", layer("l1", button("b2", on_click("t2", goto("s1"))))),
        variables=[number_var("score")],
    )


class TestCleanProject:
    def test_no_diagnostics(self):
        assert validate(_clean_project()) == []
        assert is_playable(_clean_project())

    def test_empty_project_with_name_is_clean(self):
        assert validate(Project(id="p", name="Empty")) == []

    def test_input_not_mutated(self):
        p = _clean_project()
        before = p.model_dump()
        validate(p)
        assert p.model_dump() == before


class TestProjectLevel:
    def test_none_project(self):
        assert validate(None) == ["Project cannot be null."]
        assert not is_playable(None)

    def test_blank_name(self):
        p = _clean_project()
        p.name = "   "
        assert validate(p) == ["Project name cannot be empty."]

    def test_duplicate_slide_reported_once(self):
        p = project(slide("s1"), slide("s1"), slide("s1"))
        assert validate(p) == ["Duplicate slide ID found: s1"]

    def test_duplicate_variables_first_seen_order(self):
        p = project(variables=[number_var("b"), number_var("a"), number_var("b"), number_var("a")])
        assert validate(p) == [
            "Duplicate variable ID found: b",
            "Duplicate variable ID found: a",
        ]


class TestSlideLevel:
    def test_empty_title(self):
        p = project(Slide(id="s1", title=""))
        assert validate(p) == ["Slide 's1' has an empty title."]

    def test_invalid_dimensions(self):
        p = project(Slide(id="s1", title="One", width=0, height=-5))
        assert validate(p) == [
            "Slide 's1' has invalid width: 0",
            "Slide 's1' has invalid height: -5",
        ]

    def test_duplicate_layer(self):
        p = project(slide("s1", layer("l1"), layer("l1")))
        assert validate(p) == ["Duplicate layer ID 'l1' found in slide 's1'"]

    def test_same_layer_id_on_different_slides_is_fine(self):
        p = project(slide("s1", layer("l1")), slide("s2", layer("l1")))
        assert validate(p) == []

    def test_duplicate_object_within_layer(self):
        p = project(slide("s1", layer("l1", text("o1"), text("o1"))))
        assert validate(p) == ["Duplicate object ID 'o1' found in layer 'l1' of slide 's1'"]

    def test_same_object_id_in_different_layers_is_fine(self):
        p = project(slide("s1", layer("l1", text("o1")), layer("l2", text("o1"))))
        assert validate(p) == []

    def test_trigger_without_actions(self):
        p = project(slide("s1", layer("l1", button("b1", on_click("t1")))))
        assert validate(p) == ["Trigger 't1' on object 'b1' has no actions."]

    def test_only_the_empty_trigger_is_reported(self):
        p = project(slide("s1", layer("l1", button(
            "b1", on_click("t1", goto("s1")), on_click("t2"), on_click("t3", goto("s1"))))))
        assert validate(p) == ["Trigger 't2' on object 'b1' has no actions."]


class TestReferences:
    def test_unknown_variable(self):
        p = project(slide("s1", layer("l1", button("b1", on_click("t1", set_var("ghost", 1))))))
        assert validate(p) == [
            "SetVariableAction in trigger 't1' references non-existent variable 'ghost'",
        ]

    def test_unknown_slide(self):
        p = project(slide("s1", layer("l1", button("b1", on_click("t1", goto("nowhere"))))))
        assert validate(p) == [
            "NavigateToSlideAction in trigger 't1' references non-existent slide 'nowhere'",
        ]

    def test_layer_references_are_slide_scoped(self):
        p = project(
            slide("s1", layer("l1", button("b1", on_click("t1", show("l2"))))),
            slide("s2", layer("l2")),
        )
        assert validate(p) == [
            "Layer action in trigger 't1' references non-existent layer 'l2' in slide 's1'",
        ]

    def test_hide_layer_checked_too(self):
        p = project(slide("s1", layer("l1", button("b1", on_click("t1", hide("gone"))))))
        assert validate(p) == [
            "Layer action in trigger 't1' references non-existent layer 'gone' in slide 's1'",
        ]

    def test_object_reference_resolves_across_layers(self):
        p = project(slide("s1",
                          layer("l1", button("b1", on_click("t1", show("l2"), object_id="x2"))),
                          layer("l2", text("x2"))))
        assert validate(p) == []

    def test_object_reference_on_other_slide(self):
        p = project(
            slide("s1", layer("l1", button("b1", on_click("t1", goto("s2"), object_id="x2")))),
            slide("s2", layer("l1", text("x2"))),
        )
        assert validate(p) == ["Trigger 't1' references non-existent object 'x2' in slide 's1'"]

    def test_every_broken_action_reported(self):
        p = project(slide("s1", layer("l1", button("b1", on_click(
            "t1", set_var("v1", 1), set_var("v2", 2))))))
        assert validate(p) == [
            "SetVariableAction in trigger 't1' references non-existent variable 'v1'",
            "SetVariableAction in trigger 't1' references non-existent variable 'v2'",
        ]


class TestOrdering:
    def test_checks_run_in_fixed_order(self):
        p = Project(id="p", name="", slides=[
            Slide(id="s1", title="", layers=[
                Layer(id="l1", objects=[
                    button("b1", on_click("t1", goto("zz"), set_var("vv", 1),
                                          show("ll"), object_id="oo")),
                    button("b2", on_click("t2")),
                ]),
            ]),
            Slide(id="s1", title="Again"),
        ], variables=[number_var("v"), number_var("v")])
        assert validate(p) == [
            "Project name cannot be empty.",
            "Duplicate slide ID found: s1",
            "Duplicate variable ID found: v",
            "Slide 's1' has an empty title.",
            "Trigger 't2' on object 'b2' has no actions.",
            "SetVariableAction in trigger 't1' references non-existent variable 'vv'",
            "NavigateToSlideAction in trigger 't1' references non-existent slide 'zz'",
            "Layer action in trigger 't1' references non-existent layer 'll' in slide 's1'",
            "Trigger 't1' references non-existent object 'oo' in slide 's1'",
        ]

    def test_deterministic(self):
        p = project(slide("s1", layer("l1", button("b1", on_click("t1", goto("x"), show("y"))))))
        assert validate(p) == validate(p)
