from django.urls import path

from matching import views

urlpatterns = [
    path('likes/', views.liked_jobs, name='liked_jobs'),
    path('likes/all/', views.all_likes, name='all_likes'),
    path('likes/company/<uuid:company_id>/', views.CompanyLikeView.as_view(), name='like_company'),
    path('likes/job/<uuid:job_post_id>/', views.JobLikeView.as_view(), name='like_job'),
    path('likes/video/<uuid:video_id>/', views.VideoLikeView.as_view(), name='like_video'),
    path('matches/', views.user_matches, name='user_matches'),
    path('matches/<uuid:match_id>/', views.MatchDetailView.as_view(), name='match_detail'),
    path('dashboard/candidates/', views.company_candidates, name='company_candidates'),
    path('dashboard/candidates/<int:user_id>/like/', views.CandidateLikeView.as_view(), name='candidate_like'),
    path('dashboard/candidates/<int:user_id>/pass/', views.CandidatePassView.as_view(), name='candidate_pass'),
    path('dashboard/matches/', views.company_matches, name='company_matches'),
]
