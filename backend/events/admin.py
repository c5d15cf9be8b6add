from django.contrib import admin
from .models import Event, EventTag, EventEnrollment, EventInterest


class EventTagInline(admin.TabularInline):
    model = EventTag
    extra = 0


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ['title', 'status', 'created_by', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['title', 'venue', 'description']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [EventTagInline]

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'title', 'description', 'venue', 'created_by')
        }),
        ('Location', {
            'fields': ('latitude', 'longitude')
        }),
        ('Status', {
            'fields': ('status',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(EventEnrollment)
class EventEnrollmentAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'event', 'enrolled_at']
    search_fields = ['user__user__username', 'event__title']
    readonly_fields = ['id', 'enrolled_at']


@admin.register(EventInterest)
class EventInterestAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'event', 'created_at']
    search_fields = ['user__user__username', 'event__title']
    readonly_fields = ['id', 'created_at']
