from django.urls import path
from . import views

app_name = 'reports'

urlpatterns = [
    # GET /api/reports/monthly/?month=&sort_by=&order=        - Report with totals
    path('monthly/', views.monthly_report, name='monthly'),
    # GET /api/reports/monthly/export/?month=&sort_by=&order= - xlsx download
    path('monthly/export/', views.monthly_report_export, name='monthly-export'),
]
