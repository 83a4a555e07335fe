"""Daily entry page."""
import logging

from django.contrib import messages
from django.db import DatabaseError
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone
from django.utils.http import urlencode
from django.views.decorators.http import require_http_methods

from apps.accounts.guards import identity_required
from . import workflow
from .exceptions import LedgerServiceError
from .serializers import EntryQuerySerializer, PriceInputSerializer, QuantityInputSerializer
from .services import EntryWorkflowService
from .views import PRICE_UPDATED_MESSAGE

logger = logging.getLogger(__name__)


def _entry_url(selected_date):
    return f"{reverse('home')}?{urlencode({'date': selected_date.isoformat()})}"


def _render(request, state, changing_price=False, status=200):
    return render(request, 'ledger/entry.html', {
        'state': state,
        'status': state.status.value,
        'show_price_form': changing_price or state.mode == 'set_price',
    }, status=status)


@require_http_methods(['GET', 'POST'])
@identity_required
def entry_page(request):
    """
    Render the entry form for the selected date and handle its two forms.

    POST ``action=price`` replaces the price; POST ``action=quantity`` logs
    the quantity and redirects to the next calendar day.
    """
    query = EntryQuerySerializer(data=request.GET)
    selected_date = query.validated_data.get('date') if query.is_valid() else None

    if request.method == 'GET':
        state = EntryWorkflowService.load(selected_date)
        return _render(request, state, changing_price='change_price' in request.GET)

    if request.POST.get('action') == 'price':
        return _submit_price(request, selected_date)
    return _submit_quantity(request, selected_date)


def _submit_price(request, selected_date):
    form = PriceInputSerializer(data=request.POST)
    if not form.is_valid():
        messages.error(request, 'Enter a valid price.')
        return _render(request, EntryWorkflowService.load(selected_date), changing_price=True, status=400)

    try:
        _, state = EntryWorkflowService.change_price(
            price=form.validated_data['price'],
            selected_date=selected_date,
        )
    except LedgerServiceError as e:
        messages.error(request, str(e))
        return _render(request, EntryWorkflowService.load(selected_date), changing_price=True, status=400)
    except DatabaseError:
        logger.exception("Price update failed")
        state = workflow.lookup_failed(workflow.initial(selected_date or timezone.localdate(), None))
        return _render(request, state, status=503)

    messages.success(request, PRICE_UPDATED_MESSAGE)
    return redirect(_entry_url(state.date))


def _submit_quantity(request, selected_date):
    form = QuantityInputSerializer(data=request.POST)
    if not form.is_valid():
        messages.error(request, 'Enter a valid date and quantity.')
        posted = EntryQuerySerializer(data={'date': request.POST.get('date', '')})
        if posted.is_valid() and posted.validated_data.get('date'):
            selected_date = posted.validated_data['date']
        return redirect(_entry_url(selected_date) if selected_date else reverse('home'))

    selected_date = form.validated_data['date']
    try:
        _, next_state = EntryWorkflowService.submit_quantity(
            selected_date=selected_date,
            quantity=form.validated_data['quantity'],
        )
    except LedgerServiceError as e:
        messages.error(request, str(e))
        return redirect(_entry_url(selected_date))
    except DatabaseError:
        logger.exception("Saving quantity for %s failed", selected_date)
        state = workflow.lookup_failed(workflow.initial(selected_date, None))
        return _render(request, state, status=503)

    return redirect(_entry_url(next_state.date))
