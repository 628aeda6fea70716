"""Store views: catalog, order intake and confirmation."""

from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect
from django.views.generic import DetailView, ListView, TemplateView

from . import services
from .exceptions import KitNotFound, OrderNotFound
from .forms import OrderForm

ORDER_PLACED_MESSAGE = "Order placed successfully!"


class KitListView(ListView):
    """Homepage listing all kits by name."""

    template_name = "store/kit_list.html"
    context_object_name = "kits"

    def get_queryset(self):
        return services.list_kits()


class OrderCreateView(TemplateView):
    """Order intake form for one kit.

    GET shows an empty form; POST runs the order workflow and either
    redirects to the confirmation or redisplays the form with status 422.
    """

    template_name = "store/order_form.html"

    def get_kit(self):
        try:
            return services.get_kit(self.kwargs["slug"])
        except KitNotFound:
            raise Http404("Fitness kit not found")

    def get(self, request, *args, **kwargs):
        kit = self.get_kit()
        context = self.get_context_data(
            kit=kit,
            order=services.new_order(kit),
            form=OrderForm(),
            **kwargs,
        )
        return self.render_to_response(context)

    def post(self, request, *args, **kwargs):
        result = services.submit_order(
            kwargs["slug"],
            request.POST.get("coupon_code", ""),
            request.POST,
        )

        if result.ok:
            messages.success(request, ORDER_PLACED_MESSAGE)
            return redirect("store:order-detail", pk=result.order.pk)

        if result.outcome is services.Outcome.KIT_NOT_FOUND:
            raise Http404("Fitness kit not found")

        messages.error(request, result.error)
        kit = self.get_kit()
        context = self.get_context_data(
            kit=kit,
            order=services.new_order(kit),
            form=result.form,
            **kwargs,
        )
        return self.render_to_response(context, status=422)


class OrderDetailView(DetailView):
    """Order confirmation page."""

    template_name = "store/order_detail.html"
    context_object_name = "order"

    def get_object(self, queryset=None):
        try:
            return services.get_order(self.kwargs["pk"])
        except OrderNotFound:
            raise Http404("Order not found")
