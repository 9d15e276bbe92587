from django.urls import path
from .views import NotebookListCreateView, NotebookDetailView, NotebookNoteView

urlpatterns = [
    path("", NotebookListCreateView.as_view(), name="notebook-list"),
    path("<int:pk>/", NotebookDetailView.as_view(), name="notebook-detail"),
    path("<int:pk>/notes/", NotebookNoteView.as_view(), name="notebook-add-note"),
]
