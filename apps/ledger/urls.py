from django.urls import path
from . import views

app_name = 'ledger'

urlpatterns = [
    # GET  /api/ledger/price/    - Current price
    # PUT  /api/ledger/price/    - Replace price
    path('price/', views.price, name='price'),

    # GET  /api/ledger/entry/?date=  - Entry state for a date
    # POST /api/ledger/entry/        - Log quantity for a date
    path('entry/', views.entry, name='entry'),

    # GET  /api/ledger/records/?date= - Exact-date lookup
    path('records/', views.records, name='records'),
]
