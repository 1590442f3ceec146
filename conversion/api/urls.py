from django.urls import path

from .views import CurrencyConversionView

urlpatterns = [
    path("convert/", CurrencyConversionView.as_view(), name="currency-convert"),
]
