# wiki/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from wiki.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value))


@register.filter(name="markdown_dark")
def markdown_dark_filter(value):
    """Render markdown with dark-theme PlantUML diagrams"""
    return mark_safe(render_markdown(value, context={"dark": True}))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value):
    """Template tag that passes template context to processors"""
    processor_context = {
        "request": context.get("request"),
        "dark": bool(context.get("dark_mode", False)),
    }
    return mark_safe(render_markdown(value, context=processor_context))
