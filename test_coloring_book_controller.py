"""Tests for the coloring book controller state machine."""
import threading

import pytest

from common.error_messages import ErrorCode, get_error_message
from image.controller import ColoringBookController
from image.services import ImageRequestClient
from conftest import FakeGeminiClient, FakeModels, wait_until


def make_controller(gemini, **kwargs):
    return ColoringBookController(ImageRequestClient(gemini), **kwargs)


def test_successful_generation_stores_images(fake_gemini):
    controller = make_controller(fake_gemini)
    controller.set_theme("forest animals")
    controller.set_child_name("Melis")

    assert controller.generate() is None

    assert len(controller.images) == 5
    assert controller.is_loading is False
    assert controller.error is None


@pytest.mark.parametrize("theme, name", [("", "Melis"), ("forest animals", "   ")])
def test_blank_inputs_do_not_call_the_service(fake_gemini, theme, name):
    controller = make_controller(fake_gemini, theme=theme, child_name=name)

    assert controller.generate() == ErrorCode.MISSING_FIELD

    assert controller.error == get_error_message(ErrorCode.MISSING_FIELD)
    assert fake_gemini.models.calls == []


def test_network_error_resets_state_with_fixed_message():
    gemini = FakeGeminiClient(models=FakeModels(fail_counts={4}))
    controller = make_controller(gemini, theme="forest animals", child_name="Melis")

    controller.generate()

    assert controller.error == get_error_message(ErrorCode.IMAGE_GENERATION_FAILED)
    assert controller.images == []
    assert controller.is_loading is False


def test_failed_regeneration_discards_previous_images():
    models = FakeModels()
    controller = make_controller(FakeGeminiClient(models=models))
    controller.generate()
    assert len(controller.images) == 5

    models.fail_counts = {1}
    controller.generate()

    assert controller.images == []


def test_generation_in_flight_is_ignored(fake_gemini):
    controller = make_controller(fake_gemini)
    controller.is_loading = True

    assert controller.generate() == ErrorCode.GENERATION_IN_PROGRESS
    assert fake_gemini.models.calls == []


def test_download_is_noop_without_images(fake_gemini):
    controller = make_controller(fake_gemini)

    assert controller.download() is None


def test_download_returns_named_pdf(fake_gemini, pdf_page_counter):
    controller = make_controller(fake_gemini, theme="forest animals", child_name="Melis")
    controller.generate()

    filename, pdf = controller.download()

    assert filename == "Melis_forest animals_coloring_book.pdf"
    assert pdf_page_counter(pdf) == 6


def test_snapshot_lists_preview_urls(fake_gemini):
    controller = make_controller(fake_gemini)
    controller.generate()

    state = controller.snapshot()

    assert state.image_count == 5
    assert state.image_urls[0] == "/api/coloring-book/images/0"
    assert controller.get_image(5) is None


def test_overlapping_generate_is_rejected_without_touching_state():
    models = FakeModels(delays={4: 0.3, 1: 0.3})
    controller = make_controller(FakeGeminiClient(models=models), theme="forest animals", child_name="Melis")
    outcomes = []
    first = threading.Thread(target=lambda: outcomes.append(controller.generate()))
    first.start()
    wait_until(lambda: controller.is_loading)

    assert controller.generate(theme="pirates", child_name="   ") == ErrorCode.GENERATION_IN_PROGRESS
    assert controller.theme == "forest animals"
    assert controller.child_name == "Melis"
    assert controller.error is None

    first.join()
    assert outcomes == [None]
    assert len(controller.images) == 5
    assert len(models.calls) == 2


def test_generate_returns_failure_code():
    controller = make_controller(FakeGeminiClient(models=FakeModels(fail_counts={1})))

    assert controller.generate() == ErrorCode.IMAGE_GENERATION_FAILED


def test_blank_override_is_applied_then_rejected(fake_gemini):
    controller = make_controller(fake_gemini)

    assert controller.generate(child_name=" ") == ErrorCode.MISSING_FIELD
    assert controller.child_name == " "
    assert fake_gemini.models.calls == []
