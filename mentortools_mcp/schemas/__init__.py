"""
Input contracts for every Mentortools tool.
"""

from .base import Contract, EmptyInput, PaginationInput, extend, merge, pick
from .courses import (
    AttachedFileInput,
    ContentBlockCreateInput,
    ContentInput,
    CountCoursesInput,
    CourseCreateInput,
    CourseIdInput,
    CoursePatchInput,
    CourseUpdateInput,
    CreateLessonParams,
    CreateModuleParams,
    CreateSubmoduleParams,
    LessonCreateInput,
    LessonIdInput,
    LessonPatchInput,
    ListCoursesInput,
    ListLessonsInput,
    ListModulesInput,
    ListSubmodulesInput,
    ModuleCreateInput,
    ModuleIdInput,
    ModulePatchInput,
    ModuleUpdateInput,
    PatchCourseParams,
    PatchLessonParams,
    PatchModuleParams,
    PatchSubmoduleParams,
    ReplaceCourseParams,
    ReplaceModuleParams,
    SubmoduleCreateInput,
    SubmoduleIdInput,
    SubmodulePatchInput,
)
from .media import (
    CountFilesInput,
    CountFoldersInput,
    FileIdInput,
    FileUpdateInput,
    FolderCreateInput,
    FolderIdInput,
    FolderUpdateInput,
    ListAllFilesInput,
    ListAllFoldersInput,
    ListFilesInput,
    ListFoldersInput,
    MediaPaginationInput,
    UpdateFileParams,
    UpdateFolderParams,
    UploadFileInput,
)
from .orders import AddressInput, IpnOrderPaymentInput, MarketplaceBuyerInput, TransactionInput
