from django.urls import path
from .views import NoteListCreateView, NoteDetailView, NoteTagView

urlpatterns = [
    path("", NoteListCreateView.as_view(), name="note-list"),
    path("<int:pk>/", NoteDetailView.as_view(), name="note-detail"),
    path("<int:pk>/tags/", NoteTagView.as_view(), name="note-add-tag"),
]
