"""AuthFlow Flet application: reactive state, controllers and views."""
