from django.apps import AppConfig


class WikiConfig(AppConfig):
    name = 'wiki'
    verbose_name = 'Wiki'
