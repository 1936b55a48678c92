"""HTML rendering for the contact page.

One renderer serves every page variant; a ``PageLayout`` supplies the
title, CSS classes and button labels that differ between them.
"""

from dataclasses import dataclass
from html import escape

from contactbook.domain.models.contact import ContactDraft, ContactRecord


@dataclass(frozen=True)
class PageLayout:
    """Presentation settings for one variant of the contact page."""

    name: str
    title: str
    container_class: str
    form_class: str
    input_class: str
    submit_class: str
    error_class: str
    list_class: str
    item_class: str
    edit_class: str
    delete_class: str
    create_label: str = "Add"
    update_label: str = "Save"
    edit_label: str = "Edit"
    delete_label: str = "Delete"


LAYOUTS: dict[str, PageLayout] = {
    "default": PageLayout(
        name="default",
        title="Contact List",
        container_class="container mx-auto p-4",
        form_class="mb-6 flex justify-center items-center space-x-4",
        input_class="p-3 w-1/5 border rounded h-12",
        submit_class="bg-red-500 text-white p-3 rounded h-12",
        error_class="text-red-500 w-full text-center",
        list_class="space-y-4 mt-10",
        item_class="p-4 border-b rounded-md flex justify-between items-center shadow-md",
        edit_class="bg-yellow-500 text-white p-2 rounded-full",
        delete_class="bg-red-500 text-white p-2 rounded-full",
    ),
    "compact": PageLayout(
        name="compact",
        title="Contacts",
        container_class="container p-2",
        form_class="mb-2 flex space-x-2",
        input_class="p-1 border rounded",
        submit_class="bg-blue-500 text-white p-1 rounded",
        error_class="text-red-500",
        list_class="divide-y",
        item_class="p-2 flex justify-between",
        edit_class="text-blue-600",
        delete_class="text-red-600",
        create_label="+",
        update_label="✓",
    ),
}

_INPUTS = (
    ("first_name", "text", "First Name"),
    ("last_name", "text", "Last Name"),
    ("email", "email", "Email"),
    ("phone_number", "text", "Phone Number"),
)


def get_layout(name: str | None, default: str = "default") -> PageLayout:
    """Look up a layout by name, falling back to ``default``."""
    if name and name in LAYOUTS:
        return LAYOUTS[name]
    return LAYOUTS.get(default, LAYOUTS["default"])


def _render_form(draft: ContactDraft, error: str, layout: PageLayout) -> str:
    inputs = []
    for name, input_type, placeholder in _INPUTS:
        inputs.append(
            f'<input type="{input_type}" name="{name}" placeholder="{placeholder}" '
            f'value="{escape(getattr(draft, name))}" class="{layout.input_class}">'
        )
    if draft.id is not None:
        inputs.append(f'<input type="hidden" name="id" value="{escape(draft.id)}">')

    label = layout.update_label if draft.is_editing else layout.create_label
    error_html = f'<p class="{layout.error_class}" role="alert">{escape(error)}</p>' if error else ""
    return (
        f'<form method="post" action="/?layout={layout.name}" class="{layout.form_class}">'
        + "".join(inputs)
        + f'<button type="submit" class="{layout.submit_class}">{escape(label)}</button>'
        + error_html
        + "</form>"
    )


def _render_item(contact: ContactRecord, layout: PageLayout) -> str:
    contact_id = escape(contact.id)
    return (
        f'<li class="{layout.item_class}" id="contact-{contact_id}">'
        f'<div><strong>{escape(contact.full_name)}</strong>'
        f"<p>{escape(contact.email)}</p>"
        f"<p>{escape(contact.phone_number)}</p></div>"
        f'<div><a href="/?edit={contact_id}&amp;layout={layout.name}" class="{layout.edit_class}">{escape(layout.edit_label)}</a>'
        f'<form method="post" action="/contacts/{contact_id}/delete?layout={layout.name}" style="display:inline">'
        f'<button type="submit" class="{layout.delete_class}">{escape(layout.delete_label)}</button>'
        "</form></div></li>"
    )


def render_contact_page(
    contacts: list[ContactRecord],
    draft: ContactDraft,
    error: str,
    layout: PageLayout,
) -> str:
    """Render the full contact page: form, error slot and list."""
    items = "".join(_render_item(contact, layout) for contact in contacts)
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        f"<title>{escape(layout.title)}</title></head><body>"
        f'<div class="{layout.container_class}">'
        f"<h1>{escape(layout.title)}</h1>"
        + _render_form(draft, error, layout)
        + f'<ul class="{layout.list_class}">{items}</ul>'
        + "</div></body></html>"
    )


def render_connection_check(contacts: list[ContactRecord], error: str = "") -> str:
    """Render the store connection check page."""
    if error:
        body = f'<p role="alert">{escape(error)}</p>'
    else:
        body = "<ul>" + "".join(f"<li>{escape(c.full_name)}</li>" for c in contacts) + "</ul>"
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\">"
        "<title>Store Connection Check</title></head><body>"
        "<h1>Store Connection Check</h1>"
        f"{body}</body></html>"
    )
