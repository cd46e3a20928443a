import pytest

from nbvideo.browser import locators
from nbvideo.models.job import GenerationRequest, SourceKind
from nbvideo.services.ingestion_service import NOTEBOOKLM_URL, SourceIngestion


@pytest.mark.asyncio
async def test_open_workspace_clicks_new_notebook(make_page):
    page = make_page()
    await SourceIngestion().open_workspace(page)

    assert page.actions[0] == ("goto", NOTEBOOKLM_URL)
    assert ("click", locators.NEW_NOTEBOOK.selector) in page.actions
    assert page.actions_named("fill") == []


@pytest.mark.asyncio
async def test_open_workspace_sets_title_when_field_visible(make_page):
    page = make_page(visible=lambda selector, ticks: selector == locators.NOTEBOOK_TITLE.selector)
    await SourceIngestion().open_workspace(page, "Quarterly report")

    assert ("fill", locators.NOTEBOOK_TITLE.selector, "Quarterly report") in page.actions
    assert ("press", "Enter") in page.actions


@pytest.mark.asyncio
async def test_open_workspace_skips_title_when_field_missing(make_page):
    page = make_page()
    await SourceIngestion().open_workspace(page, "Quarterly report")
    assert page.actions_named("fill") == []


@pytest.mark.asyncio
async def test_add_file_attaches_directly(make_page):
    page = make_page()
    await SourceIngestion().add(page, GenerationRequest(SourceKind.FILE, "/tmp/in.pdf"))

    assert page.actions == [("set_input_files", locators.FILE_INPUT.selector, "/tmp/in.pdf")]
    assert page.waits == [5000]


@pytest.mark.asyncio
async def test_add_url_uses_website_affordance(make_page):
    page = make_page()
    await SourceIngestion().add(page, GenerationRequest(SourceKind.URL, "https://example.com/doc"))

    assert page.actions == [
        ("click", locators.WEBSITE_SOURCE.selector),
        ("fill", locators.URL_FIELD.selector, "https://example.com/doc"),
        ("press", "Enter"),
    ]
    assert page.waits == [1000, 5000]


@pytest.mark.asyncio
async def test_add_doc_reference_uses_drive_affordance(make_page):
    page = make_page()
    doc = "https://docs.google.com/document/d/abc"
    await SourceIngestion().add(page, GenerationRequest(SourceKind.DOC_REFERENCE, doc))

    assert page.actions == [
        ("click", locators.DRIVE_SOURCE.selector),
        ("fill", locators.DRIVE_FIELD.selector, doc),
        ("press", "Enter"),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("kind", list(SourceKind))
async def test_dispatch_is_mutually_exclusive(kind, make_page):
    page = make_page()
    await SourceIngestion().add(page, GenerationRequest(kind, "value"))

    touched = {a[1] for a in page.actions if a[0] in ("click", "fill", "set_input_files")}
    branches = {
        SourceKind.FILE: {locators.FILE_INPUT.selector},
        SourceKind.URL: {locators.WEBSITE_SOURCE.selector, locators.URL_FIELD.selector},
        SourceKind.DOC_REFERENCE: {locators.DRIVE_SOURCE.selector, locators.DRIVE_FIELD.selector},
    }
    assert touched == branches[kind]
