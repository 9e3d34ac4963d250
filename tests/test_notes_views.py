"""View controller tests for the notes app views

These double as examples of subclassing ViewControllerTestCase.
"""

# pylint: disable=missing-class-docstring,missing-function-docstring
import json

from vc_testkit import ViewControllerTestCase

from .factories import NoteFactory
from .notes.views import NoteDetailView, NoteListView, NoteStatsView


class NoteListViewTests(ViewControllerTestCase, class_under_test=NoteListView):
    def test_lists_notes(self) -> None:
        NoteFactory.create_batch(2)

        response = self.load_view()

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(json.loads(response.content)["notes"]), 2)

    def test_empty(self) -> None:
        response = self.load_view()

        self.assertEqual(json.loads(response.content), {"notes": []})


class NoteDetailViewTests(ViewControllerTestCase):
    # The detail view can't load without a pk
    generate_lifecycle_tests = False

    @classmethod
    def class_under_test(cls) -> type:
        return NoteDetailView

    def test_body(self) -> None:
        note = NoteFactory(body="Hello world")
        self.view_kwargs = {"pk": note.pk}

        response = self.load_view()

        self.assertEqual(response.content, b"Hello world")
        self.assertEqual(response["Content-Type"], "text/plain")


class NoteStatsViewTests(
    ViewControllerTestCase, class_under_test=NoteStatsView, factory=NoteStatsView
):
    def test_count_is_taken_on_creation(self) -> None:
        NoteFactory()

        response = self.load_view()

        self.assertEqual(json.loads(response.content), {"count": 0})
