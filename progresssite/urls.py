"""
URL configuration for progresssite project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('progress/', include(('completion_progress.urls', 'completion_progress'), namespace='completion_progress')),

    path('', include('completion_progress.api.urls')),
]
